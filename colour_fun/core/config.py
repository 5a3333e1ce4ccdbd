"""Settings for colour-fun, read from the environment and .env files.

Lookup order (first wins):
  1. OS environment variables.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Unlike a plain dotenv loader this never writes to os.environ; the merged
values only feed the Settings object.

Variables:
  COLOUR_FUN_JSON       1/true/yes/on → JSON output by default
  COLOUR_FUN_PRECISION  decimal places for floats in text output (default 2)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'COLOUR_FUN_'
_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    json_output: bool = False
    precision: int = 2
    env_path: Path | None = None


def find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def read_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines, optional quotes, '#' comments. Only COLOUR_FUN_* keys are kept."""
    values: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key.startswith(ENV_PREFIX):
            values[key] = raw.strip().strip('"').strip("'")
    return values


def _parse_precision(raw: str) -> int:
    try:
        precision = int(raw)
    except ValueError:
        raise ValueError(f'{ENV_PREFIX}PRECISION must be an integer, got {raw!r}') from None
    if precision < 0:
        raise ValueError(f'{ENV_PREFIX}PRECISION must not be negative, got {precision}')
    return precision


def settings_from(values: Mapping[str, str], env_path: Path | None = None) -> Settings:
    json_raw = values.get(f'{ENV_PREFIX}JSON', '')
    precision_raw = values.get(f'{ENV_PREFIX}PRECISION')
    return Settings(
        json_output=json_raw.strip().lower() in _TRUTHY,
        precision=Settings.precision if precision_raw is None else _parse_precision(precision_raw),
        env_path=env_path,
    )


def load_settings(env_file: str | None = None) -> Settings:
    """Build Settings from os.environ, falling back to a .env file for unset keys.

    An explicit env_file that does not exist is ignored.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            path = None
    else:
        path = find_dotenv(Path.cwd())

    values = read_dotenv(path) if path else {}
    values.update({k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)})
    return settings_from(values, env_path=path)
