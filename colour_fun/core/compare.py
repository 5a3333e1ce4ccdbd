"""Distance and similarity between two colours in RGB, HSL and Lab.

Each metric reports the raw distance plus a similarity percentage:

    percent = floor(100 - actual * (100 / max))

where max is the same metric measured between pure white and pure black.
Distances are not comparable across metrics. The percentage is not clamped:
a pair further apart than white/black under a metric goes negative
(common for HSL, where hue differences dominate).

Example:
    >>> compare_rgb(RgbColour(3, 43, 234), RgbColour(43, 54, 231))
    ComparisonResult(distance=41.593..., percent=90)
"""

import math

import numpy as np

from colour_fun.core.convert import rgb_to_hsl, rgb_to_lab
from colour_fun.core.types import ComparisonResult, RgbColour

Triple = tuple[float, float, float]

WHITE = RgbColour(255, 255, 255)
BLACK = RgbColour(0, 0, 0)


def euclidean_distance(a: Triple, b: Triple) -> float:
    return float(np.linalg.norm(np.subtract(b, a)))


def delta_e(x: Triple, y: Triple) -> float:
    """CIE94 colour difference (graphic arts weights, kL = kC = kH = 1)."""
    delta_l = x[0] - y[0]
    delta_a = x[1] - y[1]
    delta_b = x[2] - y[2]
    c_1 = math.sqrt(x[1] ** 2 + x[2] ** 2)
    c_2 = math.sqrt(y[1] ** 2 + y[2] ** 2)
    delta_c = c_1 - c_2
    delta_h = math.sqrt(max(0.0, delta_a**2 + delta_b**2 - delta_c**2))

    s_c = 1.0 + 0.045 * c_1
    s_h = 1.0 + 0.015 * c_1
    total = delta_l**2 + (delta_c / s_c) ** 2 + (delta_h / s_h) ** 2
    return math.sqrt(max(0.0, total))


def calculate_percentage(actual: float, maximum: float) -> int:
    # actual == maximum must floor to 0; round off float noise first
    return math.floor(round(100.0 - actual * (100.0 / maximum), 9))


MAX_RGB = euclidean_distance(WHITE.as_tuple(), BLACK.as_tuple())
MAX_HSL = euclidean_distance(rgb_to_hsl(WHITE).as_tuple(), rgb_to_hsl(BLACK).as_tuple())
MAX_LAB = delta_e(rgb_to_lab(WHITE).as_tuple(), rgb_to_lab(BLACK).as_tuple())


def _result(actual: float, maximum: float) -> ComparisonResult:
    return ComparisonResult(distance=actual, percent=calculate_percentage(actual, maximum))


def compare_rgb(a: RgbColour, b: RgbColour) -> ComparisonResult:
    return _result(euclidean_distance(a.as_tuple(), b.as_tuple()), MAX_RGB)


def compare_hsl(a: RgbColour, b: RgbColour) -> ComparisonResult:
    """Euclidean distance over (hue, saturation, lightness). Hue is not wrapped."""
    return _result(euclidean_distance(rgb_to_hsl(a).as_tuple(), rgb_to_hsl(b).as_tuple()), MAX_HSL)


def compare_lab(a: RgbColour, b: RgbColour) -> ComparisonResult:
    return _result(delta_e(rgb_to_lab(a).as_tuple(), rgb_to_lab(b).as_tuple()), MAX_LAB)


class Comparison:
    """A pair of colours measured under every metric."""

    def __init__(self, a: RgbColour, b: RgbColour):
        self.a = a
        self.b = b

    def rgb(self) -> ComparisonResult:
        return compare_rgb(self.a, self.b)

    def hsl(self) -> ComparisonResult:
        return compare_hsl(self.a, self.b)

    def lab(self) -> ComparisonResult:
        return compare_lab(self.a, self.b)

    def all(self) -> dict[str, ComparisonResult]:
        return {'rgb': self.rgb(), 'hsl': self.hsl(), 'lab': self.lab()}
