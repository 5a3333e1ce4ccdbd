"""Black or white text for a background colour, chosen by YIQ luma."""

from colour_fun.core.hexcodec import parse_hex
from colour_fun.core.types import ContrastingColour, RgbColour

LUMA_THRESHOLD = 128


def yiq_luma(colour: RgbColour) -> int:
    """Perceived brightness 0..255, truncated after the weighted sum."""
    return (colour.red * 299 + colour.green * 587 + colour.blue * 114) // 1000


def contrast_of(colour: RgbColour) -> RgbColour:
    if yiq_luma(colour) >= LUMA_THRESHOLD:
        return ContrastingColour.BLACK.value
    return ContrastingColour.WHITE.value


def contrast_of_hex(text: str) -> ContrastingColour:
    """Parse a hex string and pick black or white. Hex errors propagate."""
    return ContrastingColour(contrast_of(parse_hex(text)))
