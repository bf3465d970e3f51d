"""Hue-rotation harmonies: complementary, analogous, triadic, tetradic, grayscale.

Each function converts the base colour to HSL once, rotates the hue
with (hue + delta) mod 360, keeps saturation and lightness, and
converts back. The to_hex flag picks hex strings or RGB records.
"""

from collections.abc import Sequence

from colour_scheme.core.codec import encode, hsl_to_rgb, normalize_hue, rgb_to_hsl, to_rgb
from colour_scheme.core.errors import InvalidFormat
from colour_scheme.core.types import HSL, Colour, ColourInput

SPLIT_ANGLES = (150, 210)
TRIADIC_ANGLES = (120, 240)
TETRADIC_ANGLES = (60, 180, 240)
ANALOGOUS_MAX_OFFSET = 90


def _rotate(hsl: HSL, delta: float, to_hex: bool) -> Colour:
    turned = HSL(normalize_hue(hsl.hue + delta), hsl.saturation, hsl.lightness)
    return encode(hsl_to_rgb(turned), to_hex)


def complement(colour: ColourInput, to_hex: bool = True) -> Colour:
    """The colour opposite on the wheel (180 degrees)."""
    return _rotate(rgb_to_hsl(to_rgb(colour)), 180, to_hex)


def split_complement(colour: ColourInput, to_hex: bool = True) -> list[Colour]:
    """The two colours either side of the complement (150 and 210 degrees)."""
    return rotations(colour, SPLIT_ANGLES, to_hex)


def rotations(colour: ColourInput, angles: Sequence[float], to_hex: bool = True) -> list[Colour]:
    """One colour per hue offset, in the order given."""
    hsl = rgb_to_hsl(to_rgb(colour))
    return [_rotate(hsl, angle, to_hex) for angle in angles]


def complementary(
    colour: ColourInput,
    variation: int | Sequence[float] = 1,
    to_hex: bool = True,
) -> Colour | list[Colour]:
    """Complementary colour(s).

    variation=1 returns a single colour, variation=2 the split pair and
    a sequence of degree offsets one colour per offset. Callers that want
    a fixed return shape should call complement/split_complement/rotations.
    """
    if isinstance(variation, bool):
        raise InvalidFormat(f'Unsupported complementary variation {variation!r}')
    if variation == 1:
        return complement(colour, to_hex)
    if variation == 2:
        return split_complement(colour, to_hex)
    if isinstance(variation, (int, float)):
        raise InvalidFormat(f'Unsupported complementary variation {variation!r}; use 1, 2 or a list of angles')
    return rotations(colour, variation, to_hex)


def analogous(colour: ColourInput, offset: float = 0, to_hex: bool = False) -> Colour:
    """Reflected neighbour at hue (180 - (hue + offset)) mod 360.

    This is a reflection across the 90/270 axis, not a small hue shift.
    Palettes depend on it, so it must stay as is. Offset is clamped to
    [0, 90].
    """
    hsl = rgb_to_hsl(to_rgb(colour))
    limited = min(max(offset, 0), ANALOGOUS_MAX_OFFSET)
    reflected = HSL(normalize_hue(180 - (hsl.hue + limited)), hsl.saturation, hsl.lightness)
    return encode(hsl_to_rgb(reflected), to_hex)


def triadic(
    colour: ColourInput,
    offset: float | Sequence[float] = 0,
    to_hex: bool = True,
) -> list[Colour]:
    """Colours at hue+120+offset and hue+240+offset.

    A pair of offsets applies one to each colour.
    """
    if isinstance(offset, (int, float)):
        offsets = (offset, offset)
    else:
        offsets = tuple(offset)
        if len(offsets) != 2:
            raise InvalidFormat(f'Triadic offset needs one number or a pair, got {offset!r}')
    return rotations(colour, [angle + extra for angle, extra in zip(TRIADIC_ANGLES, offsets)], to_hex)


def tetradic(colour: ColourInput, offset: float = 0, to_hex: bool = True) -> list[Colour]:
    """Colours at hue+60, hue+180 and hue+240, each shifted by offset."""
    return rotations(colour, [angle + offset for angle in TETRADIC_ANGLES], to_hex)


def grayscale(colour: ColourInput, to_hex: bool = True) -> Colour:
    """The base colour with saturation removed, lightness kept."""
    hsl = rgb_to_hsl(to_rgb(colour))
    return encode(hsl_to_rgb(HSL(hsl.hue, 0.0, hsl.lightness)), to_hex)
