"""Error taxonomy for colour_fun.

Every failure the library reports is a ColourError subclass carrying an
ErrorCode and the payload that triggered it. str(exc) is the human-readable
message. Validation helpers (is_valid_hex, is_valid_colour) never raise these.
"""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_HEX_CHARACTER = 'invalid_hex_character'
    INVALID_HEX_LENGTH = 'invalid_hex_length'
    INVALID_COLOUR_NAME = 'invalid_colour_name'
    CANVAS_ERROR = 'canvas_error'
    HSL_CONVERSION_ERROR = 'hsl_conversion_error'


class ColourError(ValueError):
    """Base class for all colour_fun errors."""

    code: ErrorCode


class InvalidHexCharacter(ColourError):
    code = ErrorCode.INVALID_HEX_CHARACTER

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'Invalid: found invalid characters in hex code: {value}')


class InvalidHexLength(ColourError):
    code = ErrorCode.INVALID_HEX_LENGTH

    def __init__(self, length: int):
        self.length = length
        super().__init__(f'Invalid: hex code has invalid length: {length}. Length must be 3 or 6.')


class InvalidColourName(ColourError):
    code = ErrorCode.INVALID_COLOUR_NAME

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Invalid: {name} is not a valid css colour name')


class CanvasError(ColourError):
    """The rendering surface failed while resolving a colour name."""

    code = ErrorCode.CANVAS_ERROR

    def __init__(self) -> None:
        super().__init__('Canvas: error occurred while getting image data from canvas')


class HslConversionError(ColourError):
    """The computed hue fell outside [0, 360). Not reachable for 8-bit RGB input."""

    code = ErrorCode.HSL_CONVERSION_ERROR

    def __init__(self, source: str):
        self.source = source
        super().__init__(f'HSL: could not convert {source} to HSL format')
