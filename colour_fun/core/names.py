"""CSS colour names → RgbColour.

Name resolution is delegated to a NamedColourResolver. The default,
CanvasResolver, paints a 1x1 Pillow surface with the colour the name maps to
(Pillow's CSS keyword table unless given another) and reads the pixel
back. StaticResolver answers from a plain {name: hex} table.

from_colour_name folds every resolver failure into InvalidColourName,
except CanvasError (the surface itself failed), which propagates as is.
is_valid_colour never raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Protocol

from PIL import Image, ImageColor, ImageDraw

from colour_fun.core.errors import CanvasError, ColourError, InvalidColourName
from colour_fun.core.hexcodec import is_valid_hex, parse_hex
from colour_fun.core.types import RgbColour


class NamedColourResolver(Protocol):
    def resolve(self, name: str) -> RgbColour: ...


class CanvasResolver:
    """Resolve CSS colour keywords by rendering them on a 1x1 RGB surface."""

    def __init__(self, keywords: Mapping[str, object] | None = None):
        # Pillow caches parsed tuples back into colormap, so values are str or (r, g, b)
        source = ImageColor.colormap if keywords is None else keywords
        self.keywords: dict[str, object] = {k.lower(): v for k, v in source.items()}

    def resolve(self, name: str) -> RgbColour:
        value = self.keywords.get(name.lower())
        if value is None:
            raise InvalidColourName(name)
        try:
            ink = (ImageColor.getrgb(value) if isinstance(value, str) else tuple(value))[:3]
        except (TypeError, ValueError) as exc:
            raise InvalidColourName(name) from exc
        try:
            surface = Image.new('RGB', (1, 1))
            ImageDraw.Draw(surface).rectangle((0, 0, 1, 1), fill=ink)
            red, green, blue = surface.getpixel((0, 0))
        except (OSError, ValueError) as exc:
            raise CanvasError() from exc
        return RgbColour(red, green, blue)


class StaticResolver:
    """Resolve names from a {name: hex} table. Keys are matched case-insensitively."""

    def __init__(self, table: Mapping[str, str]):
        self.table = {k.lower(): v for k, v in table.items()}

    def resolve(self, name: str) -> RgbColour:
        hex_value = self.table.get(name.lower())
        if hex_value is None:
            raise InvalidColourName(name)
        return parse_hex(hex_value)


@lru_cache(maxsize=1)
def default_resolver() -> NamedColourResolver:
    return CanvasResolver()


def from_colour_name(name: str, resolver: NamedColourResolver | None = None) -> RgbColour:
    """Resolve a CSS colour name.

    Raises CanvasError if the rendering surface failed, InvalidColourName for
    anything else (unknown name, resolver unavailable, host failure).
    """
    try:
        if resolver is None:
            resolver = default_resolver()
        return resolver.resolve(name)
    except CanvasError:
        raise
    except Exception as exc:
        raise InvalidColourName(name) from exc


def is_valid_colour(text: str, resolver: NamedColourResolver | None = None) -> bool:
    """True if text is hex-valid (see is_valid_hex) or a resolvable colour name."""
    if is_valid_hex(text):
        return True
    try:
        from_colour_name(text, resolver)
    except ColourError:
        return False
    return True


def parse_colour(text: str, resolver: NamedColourResolver | None = None) -> RgbColour:
    """Parse a hex string, or failing the hex character check, a colour name."""
    if is_valid_hex(text):
        return parse_hex(text)
    return from_colour_name(text, resolver)
