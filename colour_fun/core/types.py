"""Shared types for colour-fun: colour values, ComparisonResult, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class RgbColour:
    """Canonical colour value. Every other space is derived from this."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in ('red', 'green', 'blue'):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f'{channel} must be an int in 0..255, got {value!r}')

    def as_tuple(self) -> tuple[float, float, float]:
        return (float(self.red), float(self.green), float(self.blue))


@dataclass(frozen=True)
class HslColour:
    hue: int  # degrees, 0..359
    saturation: float  # percent
    lightness: float  # percent

    def as_tuple(self) -> tuple[float, float, float]:
        return (float(self.hue), self.saturation, self.lightness)


@dataclass(frozen=True)
class LabColour:
    lightness: float
    a: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.lightness, self.a, self.b)


@dataclass(frozen=True)
class ComparisonResult:
    """Distance in metric-specific units, plus similarity (may be negative)."""

    distance: float
    percent: int


class ContrastingColour(Enum):
    BLACK = RgbColour(0, 0, 0)
    WHITE = RgbColour(255, 255, 255)


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='contrast', help='Black or white text for a colour', operands=('colour',))

        @command.run
        def run(args, report, settings):
            ...

    Operand names become positional arguments. A name ending in '...' takes
    one or more values.
    """

    def __init__(self, name: str, help: str = '', operands: tuple[str, ...] = ()):
        self.name = name
        self.help = help
        self.operands = operands
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, args: Any, report: Report, settings: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report, settings)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str = ''
    inputs: list[str] = field(default_factory=list)
    results: dict[str, dict[str, Any]] = field(default_factory=dict)
    errors: list[dict[str, str]] = field(default_factory=list)

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add (or extend) a named result section."""
        self.results.setdefault(section, {}).update(data)

    def add_error(self, source: str, exc: Exception) -> None:
        """Record a failure for one input. `exc` is usually a ColourError."""
        entry = {'input': source, 'message': str(exc)}
        code = getattr(exc, 'code', None)
        if code is not None:
            entry['code'] = code.value
        self.errors.append(entry)

    @property
    def failed(self) -> bool:
        return bool(self.errors)
