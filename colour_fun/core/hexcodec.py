"""Hex colour strings: parse, validate, serialise.

parse_hex accepts an optional leading '#' and exactly 3 or 6 hex digits.
is_valid_hex only checks the character set, at any length, so it accepts
strings ('abcde') that parse_hex rejects.
"""

import re

from colour_fun.core.errors import InvalidHexCharacter, InvalidHexLength
from colour_fun.core.types import RgbColour

_HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')


def _strip_hash(text: str) -> str:
    return text[1:] if text.startswith('#') else text


def is_valid_hex(text: str) -> bool:
    """True if text (minus one leading '#') is non-empty and all hex digits."""
    return _HEX_DIGITS.fullmatch(_strip_hash(text)) is not None


def parse_hex(text: str) -> RgbColour:
    """Parse '#rgb', 'rgb', '#rrggbb' or 'rrggbb' into an RgbColour.

    Raises InvalidHexLength when the digits (after '#') are not 3 or 6 long,
    InvalidHexCharacter (carrying the original input) for any non-hex digit.
    """
    digits = _strip_hash(text)
    if len(digits) not in (3, 6):
        raise InvalidHexLength(len(digits))
    if _HEX_DIGITS.fullmatch(digits) is None:
        raise InvalidHexCharacter(text)

    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return RgbColour(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_hex(colour: RgbColour) -> str:
    return f'{colour.red:02x}{colour.green:02x}{colour.blue:02x}'
