"""colour_fun — RGB, HSL and CIE-Lab colour conversion, contrast and comparison."""

from colour_fun.core.compare import Comparison, compare_hsl, compare_lab, compare_rgb
from colour_fun.core.contrast import contrast_of, contrast_of_hex
from colour_fun.core.convert import rgb_to_hsl, rgb_to_lab
from colour_fun.core.errors import (
    CanvasError,
    ColourError,
    ErrorCode,
    HslConversionError,
    InvalidColourName,
    InvalidHexCharacter,
    InvalidHexLength,
)
from colour_fun.core.hexcodec import is_valid_hex, parse_hex, to_hex
from colour_fun.core.names import (
    CanvasResolver,
    NamedColourResolver,
    StaticResolver,
    from_colour_name,
    is_valid_colour,
    parse_colour,
)
from colour_fun.core.types import ComparisonResult, ContrastingColour, HslColour, LabColour, RgbColour

__all__ = [
    'CanvasError',
    'CanvasResolver',
    'ColourError',
    'Comparison',
    'ComparisonResult',
    'ContrastingColour',
    'ErrorCode',
    'HslColour',
    'HslConversionError',
    'InvalidColourName',
    'InvalidHexCharacter',
    'InvalidHexLength',
    'LabColour',
    'NamedColourResolver',
    'RgbColour',
    'StaticResolver',
    'compare_hsl',
    'compare_lab',
    'compare_rgb',
    'contrast_of',
    'contrast_of_hex',
    'from_colour_name',
    'is_valid_colour',
    'is_valid_hex',
    'parse_colour',
    'parse_hex',
    'rgb_to_hsl',
    'rgb_to_lab',
    'to_hex',
]
