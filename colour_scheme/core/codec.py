"""Conversions between hex strings, RGB, HSL, CMYK and 24-bit decimals.

Every public entry point in colour_scheme funnels its input through
normalize(), so validation happens in exactly one place:

    normalize('#ABC')            -> 'aabbcc'
    normalize(RGB(0, 156, 255))  -> '009cff'

Hex strings returned here are always 6 lowercase digits with no '#'.
"""

import math
import numbers
import re
from collections.abc import Iterable

from colour_scheme.core.errors import InvalidFormat, InvalidRange, UndefinedInput
from colour_scheme.core.types import CMYK, HSL, RGB, Colour, ColourInput

MAX_DEC = 0xFFFFFF
CIRCLE = 360.0

_HEX_DIGITS = re.compile(r'^[0-9a-fA-F]+$')


def _round(value: float) -> int:
    """Round half up, so 127.5 -> 128 regardless of parity."""
    return int(math.floor(value + 0.5))


def normalize_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    wrapped = hue % CIRCLE
    # -1e-15 % 360 == 360.0 in floating point
    return 0.0 if wrapped >= CIRCLE else wrapped


def _check_rgb(rgb: RGB) -> None:
    for channel in ('red', 'green', 'blue'):
        value = getattr(rgb, channel)
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidFormat(f'RGB {channel} must be an integer, got {value!r}')
        if value < 0 or value > 255:
            raise InvalidRange(f'RGB {channel} {value} outside [0, 255]')


def _digits(code: str) -> str:
    """Strip the marker and expand shorthand; return 6 lowercase hex digits."""
    digits = code.strip()
    if digits.startswith('#'):
        digits = digits[1:]
    if not _HEX_DIGITS.match(digits):
        raise InvalidFormat(f'Invalid colour hex format: {code!r}')
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    elif len(digits) != 6:
        raise InvalidFormat(f'Invalid colour hex format: {code!r} has {len(digits)} digits, expected 3 or 6')
    return digits.lower()


def normalize(colour: ColourInput) -> str:
    """Validate a hex string or RGB record and return canonical 6-digit lowercase hex."""
    if colour is None:
        raise UndefinedInput('No colour given')
    if isinstance(colour, str):
        return _digits(colour)
    if isinstance(colour, RGB):
        return rgb_to_hex(colour)
    raise InvalidFormat(f'Unsupported colour input {colour!r}; expected hex string or RGB')


def hex_to_rgb(code: str) -> RGB:
    """'009cff' -> RGB(0, 156, 255). Accepts '#' and 3-digit shorthand."""
    if code is None:
        raise UndefinedInput('No hex code given')
    digits = normalize(code)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    if rgb is None:
        raise UndefinedInput('No RGB colour given')
    _check_rgb(rgb)
    return f'{int(rgb.red):02x}{int(rgb.green):02x}{int(rgb.blue):02x}'


def to_rgb(colour: ColourInput) -> RGB:
    """Normalize any colour input into an RGB record."""
    return hex_to_rgb(normalize(colour))


def encode(rgb: RGB, to_hex: bool) -> Colour:
    """Return rgb as a hex string or as-is, per the caller's flag."""
    return rgb_to_hex(rgb) if to_hex else rgb


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Max/min channel decomposition. Hue is always in [0, 360)."""
    if rgb is None:
        raise UndefinedInput('No RGB colour given')
    _check_rgb(rgb)
    hi = max(rgb.red, rgb.green, rgb.blue)
    lo = min(rgb.red, rgb.green, rgb.blue)
    r, g, b = rgb.red / 255, rgb.green / 255, rgb.blue / 255
    mx, mn = hi / 255, lo / 255

    lightness = (mx + mn) / 2
    if hi == lo:
        return HSL(0.0, 0.0, lightness)

    d = mx - mn
    saturation = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)

    if hi == rgb.red:
        hue = (g - b) / d + (6 if g < b else 0)
    elif hi == rgb.green:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4

    return HSL(normalize_hue(hue * 60), saturation, lightness)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    if hsl is None:
        raise UndefinedInput('No HSL colour given')
    for name in ('saturation', 'lightness'):
        value = getattr(hsl, name)
        if value < 0 or value > 1:
            raise InvalidRange(f'HSL {name} {value} outside [0, 1]')

    s, lum = hsl.saturation, hsl.lightness
    if s == 0:
        r = g = b = lum  # achromatic
    else:
        h = normalize_hue(hsl.hue) / CIRCLE
        q = lum * (1 + s) if lum < 0.5 else lum + s - lum * s
        p = 2 * lum - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(_round(r * 255), _round(g * 255), _round(b * 255))


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    if rgb is None:
        raise UndefinedInput('No RGB colour given')
    _check_rgb(rgb)
    r, g, b = rgb.red / 255, rgb.green / 255, rgb.blue / 255
    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(0.0, 0.0, 0.0, 1.0)
    return CMYK((1 - r - k) / (1 - k), (1 - g - k) / (1 - k), (1 - b - k) / (1 - k), k)


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    if cmyk is None:
        raise UndefinedInput('No CMYK colour given')
    for name in ('c', 'm', 'y', 'k'):
        value = getattr(cmyk, name)
        if value < 0 or value > 1:
            raise InvalidRange(f'CMYK {name} {value} outside [0, 1]')
    scale = 255 * (1 - cmyk.k)
    return RGB(_round(scale * (1 - cmyk.c)), _round(scale * (1 - cmyk.m)), _round(scale * (1 - cmyk.y)))


def hex_to_dec(code: str) -> int:
    """'0000ff' -> 255."""
    if code is None:
        raise UndefinedInput('No hex code given')
    return int(normalize(code), 16)


def dec_to_hex(value: int) -> str:
    """255 -> '0000ff'."""
    if value is None:
        raise UndefinedInput('No decimal value given')
    if value < 0 or value > MAX_DEC:
        raise InvalidRange(f'Decimal colour {value} outside [0, {MAX_DEC}]')
    return f'{value:06x}'


def colour_equiv_angle(colour: ColourInput, angle: float) -> str:
    """Shift a colour's 24-bit value by the fraction of the circle given by angle.

    Works on the packed integer rather than in HSL, so the result walks
    through blue, then green, then red as the angle grows.
    """
    fraction = normalize_hue(angle) / CIRCLE
    shifted = (fraction * MAX_DEC + hex_to_dec(normalize(colour))) % MAX_DEC
    return dec_to_hex(_round(shifted) % MAX_DEC)


def sort_by_hue(colours: Iterable[RGB | HSL]) -> list[HSL]:
    """Convert to HSL, wrap hues into [0, 360) and order by ascending hue."""
    hsls = [
        HSL(normalize_hue(c.hue), c.saturation, c.lightness) if isinstance(c, HSL) else rgb_to_hsl(c) for c in colours
    ]
    return sorted(hsls, key=lambda c: c.hue)
