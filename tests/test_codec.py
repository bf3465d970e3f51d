"""Tests for colour_scheme.core.codec — normalization and colour-space conversions."""

import itertools

import numpy as np
import pytest
from colour_scheme.core.codec import (
    cmyk_to_rgb,
    colour_equiv_angle,
    dec_to_hex,
    hex_to_dec,
    hex_to_rgb,
    hsl_to_rgb,
    normalize,
    normalize_hue,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    sort_by_hue,
)
from colour_scheme.core.errors import ColourError, InvalidFormat, InvalidRange, UndefinedInput
from colour_scheme.core.types import CMYK, HSL, RGB

SAMPLES = [
    RGB(0, 0, 0),
    RGB(255, 255, 255),
    RGB(0, 156, 255),
    RGB(255, 0, 0),
    RGB(18, 52, 86),
    RGB(200, 120, 40),
    RGB(127, 127, 128),
    RGB(1, 254, 100),
]


def _close(a: RGB, b: RGB, tol: int = 1) -> bool:
    return all(abs(x - y) <= tol for x, y in zip(a.as_tuple(), b.as_tuple()))


class TestNormalize:
    def test_three_digit_expands(self):
        assert normalize('abc') == 'aabbcc'

    def test_marker_stripped(self):
        assert normalize('#009cff') == '009cff'

    def test_lowercased(self):
        assert normalize('#ABC') == 'aabbcc'
        assert normalize('009CFF') == '009cff'

    def test_rgb_record(self):
        assert normalize(RGB(0, 156, 255)) == '009cff'

    def test_five_digits_invalid(self):
        with pytest.raises(InvalidFormat):
            normalize('#12345')

    def test_four_digits_invalid(self):
        with pytest.raises(InvalidFormat):
            normalize('1234')

    def test_seven_digits_invalid(self):
        with pytest.raises(InvalidFormat):
            normalize('#1234567')

    def test_non_hex_invalid(self):
        with pytest.raises(InvalidFormat):
            normalize('ggg')
        with pytest.raises(InvalidFormat):
            normalize('#12z456')

    def test_empty_invalid(self):
        with pytest.raises(InvalidFormat):
            normalize('')

    def test_rgb_out_of_range(self):
        with pytest.raises(InvalidRange):
            normalize(RGB(300, 0, 0))
        with pytest.raises(InvalidRange):
            normalize(RGB(0, -1, 0))

    def test_rgb_non_integer(self):
        with pytest.raises(InvalidFormat):
            normalize(RGB(1.5, 0, 0))

    def test_rgb_numpy_integers(self):
        assert normalize(RGB(*np.array([0, 156, 255]))) == '009cff'
        assert normalize(RGB(np.uint8(1), np.int32(2), np.int64(3))) == '010203'

    def test_rgb_bool_rejected(self):
        with pytest.raises(InvalidFormat):
            normalize(RGB(True, 0, 0))

    def test_none_is_undefined(self):
        with pytest.raises(UndefinedInput):
            normalize(None)

    def test_other_type_invalid(self):
        with pytest.raises(InvalidFormat):
            normalize(0x009CFF)

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidFormat, ColourError)
        assert issubclass(InvalidRange, ValueError)
        assert issubclass(UndefinedInput, ValueError)


class TestHexRgb:
    def test_known_value(self):
        assert hex_to_rgb('009cff') == RGB(0, 156, 255)

    def test_accepts_marker_and_shorthand(self):
        assert hex_to_rgb('#fff') == RGB(255, 255, 255)

    def test_undefined(self):
        with pytest.raises(UndefinedInput):
            hex_to_rgb(None)

    def test_rgb_to_hex_zero_pads(self):
        assert rgb_to_hex(RGB(1, 2, 3)) == '010203'

    def test_rgb_to_hex_ignores_alpha(self):
        assert rgb_to_hex(RGB(255, 0, 0, alpha=0.5)) == 'ff0000'

    def test_round_trip_from_rgb(self):
        for rgb in SAMPLES:
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb

    def test_round_trip_from_hex(self):
        for code in ['000000', 'ffffff', '009cff', '123456', 'abcdef', '7f7f80']:
            assert rgb_to_hex(hex_to_rgb(code)) == code


class TestRgbToHsl:
    def test_red(self):
        hsl = rgb_to_hsl(RGB(255, 0, 0))
        assert hsl.hue == 0
        assert hsl.saturation == 1
        assert hsl.lightness == 0.5

    def test_green_and_blue(self):
        assert rgb_to_hsl(RGB(0, 255, 0)).hue == pytest.approx(120)
        assert rgb_to_hsl(RGB(0, 0, 255)).hue == pytest.approx(240)

    def test_magenta_wraps_below_360(self):
        assert rgb_to_hsl(RGB(255, 0, 255)).hue == pytest.approx(300)

    def test_reddish_with_more_blue(self):
        # red channel max, green < blue: hue lands just under 360
        hsl = rgb_to_hsl(RGB(255, 0, 10))
        assert 350 < hsl.hue < 360

    def test_achromatic(self):
        hsl = rgb_to_hsl(RGB(128, 128, 128))
        assert hsl.hue == 0
        assert hsl.saturation == 0
        assert hsl.lightness == pytest.approx(128 / 255)

    def test_light_colour_saturation_branch(self):
        hsl = rgb_to_hsl(RGB(255, 200, 200))
        assert hsl.lightness > 0.5
        assert hsl.saturation == pytest.approx(1.0)

    def test_hue_always_in_range(self):
        levels = [0, 1, 64, 127, 128, 200, 254, 255]
        for r, g, b in itertools.product(levels, repeat=3):
            hue = rgb_to_hsl(RGB(r, g, b)).hue
            assert 0 <= hue < 360

    def test_rejects_out_of_range(self):
        with pytest.raises(InvalidRange):
            rgb_to_hsl(RGB(0, 0, 256))


class TestHslToRgb:
    def test_primaries(self):
        assert hsl_to_rgb(HSL(0, 1, 0.5)) == RGB(255, 0, 0)
        assert hsl_to_rgb(HSL(120, 1, 0.5)) == RGB(0, 255, 0)
        assert hsl_to_rgb(HSL(240, 1, 0.5)) == RGB(0, 0, 255)

    def test_hue_outside_range_is_wrapped(self):
        assert hsl_to_rgb(HSL(-120, 1, 0.5)) == hsl_to_rgb(HSL(240, 1, 0.5))
        assert hsl_to_rgb(HSL(480, 1, 0.5)) == hsl_to_rgb(HSL(120, 1, 0.5))

    def test_achromatic_rounds_half_up(self):
        assert hsl_to_rgb(HSL(0, 0, 0.5)) == RGB(128, 128, 128)

    def test_round_trip_within_one(self):
        for rgb in SAMPLES:
            assert _close(hsl_to_rgb(rgb_to_hsl(rgb)), rgb)

    def test_rejects_bad_saturation(self):
        with pytest.raises(InvalidRange):
            hsl_to_rgb(HSL(0, 1.5, 0.5))

    def test_undefined(self):
        with pytest.raises(UndefinedInput):
            hsl_to_rgb(None)


class TestNormalizeHue:
    def test_wraps(self):
        assert normalize_hue(370) == pytest.approx(10)
        assert normalize_hue(-10) == pytest.approx(350)

    def test_tiny_negative_is_zero(self):
        assert normalize_hue(-1e-15) == 0.0


class TestCmyk:
    def test_red(self):
        assert rgb_to_cmyk(RGB(255, 0, 0)) == CMYK(0.0, 1.0, 1.0, 0.0)

    def test_black(self):
        assert rgb_to_cmyk(RGB(0, 0, 0)) == CMYK(0.0, 0.0, 0.0, 1.0)

    def test_white(self):
        assert rgb_to_cmyk(RGB(255, 255, 255)) == CMYK(0.0, 0.0, 0.0, 0.0)

    def test_back_to_rgb(self):
        assert cmyk_to_rgb(CMYK(0, 1, 1, 0)) == RGB(255, 0, 0)
        assert cmyk_to_rgb(CMYK(0, 0, 0, 1)) == RGB(0, 0, 0)

    def test_round_trip_within_one(self):
        for rgb in SAMPLES:
            assert _close(cmyk_to_rgb(rgb_to_cmyk(rgb)), rgb)

    def test_rejects_out_of_range(self):
        with pytest.raises(InvalidRange):
            cmyk_to_rgb(CMYK(1.2, 0, 0, 0))


class TestDecimal:
    def test_hex_to_dec(self):
        assert hex_to_dec('0000ff') == 255
        assert hex_to_dec('#fff') == 0xFFFFFF

    def test_dec_to_hex_pads(self):
        assert dec_to_hex(255) == '0000ff'

    def test_dec_to_hex_range(self):
        with pytest.raises(InvalidRange):
            dec_to_hex(0x1000000)
        with pytest.raises(InvalidRange):
            dec_to_hex(-1)

    def test_hex_to_dec_undefined(self):
        with pytest.raises(UndefinedInput):
            hex_to_dec(None)


class TestEquivAngle:
    def test_zero_angle_is_identity(self):
        assert colour_equiv_angle('009cff', 0) == '009cff'

    def test_full_turn_is_identity(self):
        assert colour_equiv_angle('009cff', 360) == '009cff'

    def test_half_turn_from_black(self):
        # 0.5 * 0xffffff = 8388607.5, rounded up
        assert colour_equiv_angle('000000', 180) == '800000'

    def test_angle_wraps(self):
        assert colour_equiv_angle('123456', 540) == colour_equiv_angle('123456', 180)


class TestSortByHue:
    def test_orders_rgb(self):
        result = sort_by_hue([RGB(0, 0, 255), RGB(255, 0, 0), RGB(0, 255, 0)])
        assert [round(c.hue) for c in result] == [0, 120, 240]

    def test_accepts_hsl(self):
        result = sort_by_hue([HSL(300, 1, 0.5), RGB(0, 255, 0)])
        assert [round(c.hue) for c in result] == [120, 300]

    def test_wraps_hsl_hues(self):
        result = sort_by_hue([HSL(400, 0.5, 0.5), RGB(0, 0, 255), HSL(-30, 0.5, 0.5)])
        assert [round(c.hue) for c in result] == [40, 240, 330]
        assert all(0 <= c.hue < 360 for c in result)
