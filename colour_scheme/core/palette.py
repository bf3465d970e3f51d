"""Palette composition: primary/secondary/accent(/neutral) built from harmonies.

Every palette takes an optional base colour and an optional numpy
Generator. Without a colour, one is drawn from the generator; pass
numpy.random.default_rng(seed) for repeatable palettes.
"""

import numpy as np

from colour_scheme.core.codec import MAX_DEC, dec_to_hex, encode, normalize, to_rgb
from colour_scheme.core.harmony import (
    analogous,
    complement,
    grayscale,
    rotations,
    split_complement,
    tetradic,
    triadic,
)
from colour_scheme.core.monochrome import monochrome
from colour_scheme.core.types import ColourInput, Palette

ACCENT_ANGLES = (45, 90, 135)
GAMMA_SHIFT = 25
MIX_OFFSET_RANGE = (15, 90)  # half-open


def random_colour(rng: np.random.Generator | None = None) -> str:
    """Uniformly random 6-digit hex colour."""
    rng = rng if rng is not None else np.random.default_rng()
    return dec_to_hex(int(rng.integers(0, MAX_DEC + 1)))


def _base(colour: ColourInput | None, rng: np.random.Generator | None) -> str:
    return normalize(colour) if colour is not None else random_colour(rng)


def alpha(
    colour: ColourInput | None = None,
    offset: float = 0,
    to_hex: bool = True,
    rng: np.random.Generator | None = None,
) -> Palette:
    """Base, its complement, and its analogous reflection."""
    base = _base(colour, rng)
    return Palette(
        primary=encode(to_rgb(base), to_hex),
        secondary=complement(base, to_hex),
        accent=analogous(base, offset, to_hex),
    )


def beta(
    colour: ColourInput | None = None,
    offset: float = 0,
    to_hex: bool = True,
    rng: np.random.Generator | None = None,
) -> Palette:
    """Base, its triadic pair, and three complementary accents at 45/90/135."""
    base = _base(colour, rng)
    return Palette(
        primary=encode(to_rgb(base), to_hex),
        secondary=triadic(base, offset, to_hex),
        accent=rotations(base, ACCENT_ANGLES, to_hex),
    )


def gamma(
    colour: ColourInput | None = None,
    offset: float = 0,
    to_hex: bool = True,
    rng: np.random.Generator | None = None,
) -> Palette:
    """Beta with the triadic pair turned a further 25 degrees."""
    return beta(_base(colour, rng), GAMMA_SHIFT + offset, to_hex)


def pro_tetradic(
    colour: ColourInput | None = None,
    offset: float = 0,
    to_hex: bool = True,
    rng: np.random.Generator | None = None,
) -> Palette:
    """Monochrome ladders for the base and each of its three tetradic colours."""
    base = _base(colour, rng)
    first, *rest = tetradic(base, offset, True)
    return Palette(
        primary=monochrome(base, to_hex),
        secondary=monochrome(first, to_hex),
        accent=[monochrome(c, to_hex) for c in rest],
        neutral=grayscale(base, to_hex),
    )


def pro_complementary(
    colour: ColourInput | None = None,
    to_hex: bool = True,
    rng: np.random.Generator | None = None,
) -> Palette:
    """Monochrome ladders for the base and both colours of its split complement."""
    base = _base(colour, rng)
    left, right = split_complement(base, True)
    return Palette(
        primary=monochrome(base, to_hex),
        secondary=monochrome(left, to_hex),
        accent=monochrome(right, to_hex),
        neutral=grayscale(base, to_hex),
    )


def mix(
    colour: ColourInput | None = None,
    to_hex: bool = True,
    rng: np.random.Generator | None = None,
) -> Palette:
    """Random pick from {base, analogous, split pair}, accents from its tetradic-of-analogous."""
    rng = rng if rng is not None else np.random.default_rng()
    base = _base(colour, rng)
    candidates = [base, analogous(base, 0, True), *split_complement(base, True)]
    picked = candidates[int(rng.integers(len(candidates)))]
    offset = int(rng.integers(*MIX_OFFSET_RANGE))
    return Palette(
        primary=encode(to_rgb(base), to_hex),
        secondary=encode(to_rgb(picked), to_hex),
        accent=tetradic(analogous(picked, 0, True), offset, to_hex),
    )


PALETTES = {
    'alpha': alpha,
    'beta': beta,
    'gamma': gamma,
    'pro-tetradic': pro_tetradic,
    'pro-complementary': pro_complementary,
    'mix': mix,
}
