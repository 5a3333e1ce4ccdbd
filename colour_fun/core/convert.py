"""RGB → HSL and RGB → CIE-Lab conversion.

HSL: hue in whole degrees [0, 360), saturation and lightness as percentages.
When two channels tie at the maximum (within 0.001), the first of
red, green, blue wins the hue sector. Achromatic colours get hue 0, saturation 0.

Lab: sRGB gamma expansion, linear sRGB → XYZ (D65), then the CIE Lab
non-linearity. Defined for every 8-bit RGB input.
"""

import math

import numpy as np

from colour_fun.core.errors import HslConversionError
from colour_fun.core.types import HslColour, LabColour, RgbColour

# Channel equality tolerance when choosing the hue sector
MAX_TOLERANCE = 0.001

SRGB_TO_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ]
)
D65_WHITE = np.array([0.95047, 1.0, 1.08883])


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rgb_to_hsl(colour: RgbColour) -> HslColour:
    """Convert to HSL. Raises HslConversionError if the hue leaves [0, 360)."""
    red = colour.red / 255.0
    green = colour.green / 255.0
    blue = colour.blue / 255.0

    high = max(red, green, blue)
    low = min(red, green, blue)
    delta = high - low
    lightness = (high + low) / 2.0

    if delta == 0.0:
        sector = 0.0
        saturation = 0.0
    else:
        saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))
        if abs(high - red) < MAX_TOLERANCE:
            sector = math.fmod((green - blue) / delta, 6.0)
        elif abs(high - green) < MAX_TOLERANCE:
            sector = (blue - red) / delta + 2.0
        else:
            sector = (red - green) / delta + 4.0

    hue = _round_half_away(sector * 60.0)
    if hue < 0:
        hue += 360
    if not 0 <= hue < 360:
        raise HslConversionError(repr(colour))

    return HslColour(
        hue=hue,
        saturation=abs(saturation * 100.0),
        lightness=abs(lightness * 100.0),
    )


def _expand_gamma(channel: np.ndarray) -> np.ndarray:
    return np.where(channel > 0.04045, ((channel + 0.055) / 1.055) ** 2.4, channel / 12.92)


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > 0.008856, np.cbrt(t), 7.787 * t + 16.0 / 116.0)


def rgb_to_lab(colour: RgbColour) -> LabColour:
    linear = _expand_gamma(np.array(colour.as_tuple()) / 255.0)
    fx, fy, fz = _lab_f(SRGB_TO_XYZ @ linear / D65_WHITE)
    return LabColour(
        lightness=float(116.0 * fy - 16.0),
        a=float(500.0 * (fx - fy)),
        b=float(200.0 * (fy - fz)),
    )
