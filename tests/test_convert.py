"""Tests for colour_fun.core.convert — RGB to HSL and Lab."""

import pytest
from colour_fun.core import convert
from colour_fun.core.convert import rgb_to_hsl, rgb_to_lab
from colour_fun.core.errors import HslConversionError
from colour_fun.core.hexcodec import parse_hex
from colour_fun.core.types import HslColour, LabColour, RgbColour


class TestRgbToHsl:
    def test_reddish(self):
        hsl = rgb_to_hsl(RgbColour(244, 43, 32))
        assert hsl.hue == 3
        assert hsl.saturation == pytest.approx(90.5983, abs=1e-3)
        assert hsl.lightness == pytest.approx(54.11765, abs=1e-3)

    def test_rebeccapurple(self):
        hsl = rgb_to_hsl(parse_hex('663399'))
        assert hsl.hue == 270
        assert hsl.saturation == pytest.approx(50.0)
        assert hsl.lightness == pytest.approx(40.0)

    def test_white(self):
        assert rgb_to_hsl(RgbColour(255, 255, 255)) == HslColour(0, 0.0, 100.0)

    def test_black(self):
        assert rgb_to_hsl(RgbColour(0, 0, 0)) == HslColour(0, 0.0, 0.0)

    def test_greys_have_no_hue_or_saturation(self):
        for level in [1, 17, 128, 200, 254]:
            hsl = rgb_to_hsl(RgbColour(level, level, level))
            assert hsl.hue == 0
            assert hsl.saturation == 0.0

    def test_primaries(self):
        assert rgb_to_hsl(RgbColour(255, 0, 0)).hue == 0
        assert rgb_to_hsl(RgbColour(0, 255, 0)).hue == 120
        assert rgb_to_hsl(RgbColour(0, 0, 255)).hue == 240

    def test_negative_sector_wraps(self):
        # red max, blue above green: raw hue is about -2.35 degrees
        assert rgb_to_hsl(RgbColour(255, 0, 10)).hue == 358

    def test_tie_prefers_red_then_green(self):
        assert rgb_to_hsl(RgbColour(255, 255, 0)).hue == 60  # red branch
        assert rgb_to_hsl(RgbColour(255, 0, 255)).hue == 300  # red branch, wrapped
        assert rgb_to_hsl(RgbColour(0, 255, 255)).hue == 180  # green branch

    def test_hue_always_in_range(self):
        for colour in [RgbColour(r, g, b) for r in (0, 37, 255) for g in (0, 129, 255) for b in (3, 200, 255)]:
            assert 0 <= rgb_to_hsl(colour).hue < 360

    def test_out_of_range_hue_is_an_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(convert, '_round_half_away', lambda value: 400)
        with pytest.raises(HslConversionError) as info:
            rgb_to_hsl(RgbColour(244, 43, 32))
        assert 'RgbColour(red=244, green=43, blue=32)' in str(info.value)
        assert info.value.source == 'RgbColour(red=244, green=43, blue=32)'


class TestRoundHalfAway:
    def test_halves(self):
        assert convert._round_half_away(2.5) == 3
        assert convert._round_half_away(-2.5) == -3
        assert convert._round_half_away(-0.4) == 0


class TestRgbToLab:
    def test_reddish(self):
        lab = rgb_to_lab(RgbColour(244, 43, 32))
        assert lab.lightness == pytest.approx(53.020706, abs=5e-3)
        assert lab.a == pytest.approx(72.232574, abs=5e-3)
        assert lab.b == pytest.approx(55.97896, abs=5e-3)

    def test_rebeccapurple(self):
        lab = rgb_to_lab(parse_hex('663399'))
        assert lab.lightness == pytest.approx(32.902435, abs=5e-3)
        assert lab.a == pytest.approx(42.89223, abs=5e-3)
        assert lab.b == pytest.approx(-47.156937, abs=5e-3)

    def test_white(self):
        lab = rgb_to_lab(RgbColour(255, 255, 255))
        assert lab.lightness == pytest.approx(100.0, abs=1e-6)
        assert lab.a == pytest.approx(0.00525, abs=1e-3)
        assert lab.b == pytest.approx(-0.0104, abs=1e-3)

    def test_black(self):
        lab = rgb_to_lab(RgbColour(0, 0, 0))
        assert lab.as_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_returns_python_floats(self):
        lab = rgb_to_lab(RgbColour(10, 20, 30))
        assert isinstance(lab, LabColour)
        assert all(type(v) is float for v in lab.as_tuple())

    def test_dark_channels_use_linear_segment(self):
        # 10/255 is below the 0.04045 gamma threshold
        lab = rgb_to_lab(RgbColour(10, 10, 10))
        assert 0.0 < lab.lightness < 5.0
