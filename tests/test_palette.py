"""Tests for colour_scheme.core.palette — palette roles and seeded randomness."""

import numpy as np
from colour_scheme.core.harmony import (
    analogous,
    complement,
    complementary,
    grayscale,
    split_complement,
    tetradic,
    triadic,
)
from colour_scheme.core.monochrome import monochrome
from colour_scheme.core.palette import (
    PALETTES,
    alpha,
    beta,
    gamma,
    mix,
    pro_complementary,
    pro_tetradic,
    random_colour,
)
from colour_scheme.core.types import RGB, Palette

BASE = '009cff'


class TestRandomColour:
    def test_is_six_hex_digits(self):
        code = random_colour(np.random.default_rng(1))
        assert len(code) == 6
        assert 0 <= int(code, 16) <= 0xFFFFFF

    def test_seeded_is_repeatable(self):
        assert random_colour(np.random.default_rng(42)) == random_colour(np.random.default_rng(42))

    def test_unseeded_works(self):
        assert len(random_colour()) == 6

    def test_sequence_varies(self):
        rng = np.random.default_rng(5)
        draws = {random_colour(rng) for _ in range(20)}
        assert len(draws) > 1


class TestAlpha:
    def test_roles(self):
        p = alpha(BASE)
        assert p.primary == BASE
        assert p.secondary == complement(BASE)
        assert p.accent == analogous(BASE, 0, True)
        assert p.neutral is None

    def test_offset_reaches_accent(self):
        assert alpha(BASE, 30).accent == analogous(BASE, 30, True)

    def test_rgb_output(self):
        p = alpha(BASE, to_hex=False)
        assert p.primary == RGB(0, 156, 255)
        assert isinstance(p.secondary, RGB)
        assert isinstance(p.accent, RGB)

    def test_random_base_from_seed(self):
        p = alpha(rng=np.random.default_rng(11))
        assert p.primary == random_colour(np.random.default_rng(11))


class TestBetaGamma:
    def test_beta_roles(self):
        p = beta(BASE)
        assert p.primary == BASE
        assert p.secondary == triadic(BASE, 0)
        assert p.accent == complementary(BASE, [45, 90, 135])

    def test_gamma_is_beta_plus_25(self):
        assert gamma(BASE) == beta(BASE, 25)
        assert gamma(BASE, 5).secondary == triadic(BASE, 30)

    def test_accents_unchanged_by_offset(self):
        assert gamma(BASE, 10).accent == beta(BASE).accent


class TestProPalettes:
    def test_pro_tetradic(self):
        p = pro_tetradic(BASE)
        harmony = tetradic(BASE)
        assert p.primary == monochrome(BASE)
        assert p.secondary == monochrome(harmony[0])
        assert p.accent == [monochrome(harmony[1]), monochrome(harmony[2])]
        assert p.neutral == grayscale(BASE)

    def test_pro_complementary(self):
        p = pro_complementary(BASE)
        left, right = split_complement(BASE)
        assert p.secondary == monochrome(left)
        assert p.accent == monochrome(right)

    def test_pro_rgb_output(self):
        p = pro_complementary(BASE, to_hex=False)
        assert all(isinstance(c, RGB) for c in p.primary)
        assert isinstance(p.neutral, RGB)


class TestMix:
    def test_seeded_is_repeatable(self):
        assert mix(BASE, rng=np.random.default_rng(3)) == mix(BASE, rng=np.random.default_rng(3))

    def test_secondary_from_candidates(self):
        candidates = [BASE, analogous(BASE, 0, True), *split_complement(BASE)]
        for seed in range(10):
            p = mix(BASE, rng=np.random.default_rng(seed))
            assert p.primary == BASE
            assert p.secondary in candidates
            assert len(p.accent) == 3

    def test_accent_is_tetradic_of_analogous(self):
        p = mix(BASE, rng=np.random.default_rng(8))
        reflected = analogous(p.secondary, 0, True)
        assert any(p.accent == tetradic(reflected, offset) for offset in range(15, 90))


class TestPaletteRecord:
    def test_as_dict_omits_missing_neutral(self):
        assert alpha(BASE).as_dict().keys() == {'primary', 'secondary', 'accent'}

    def test_as_dict_includes_neutral(self):
        assert 'neutral' in pro_tetradic(BASE).as_dict()

    def test_registry_of_kinds(self):
        assert set(PALETTES) == {'alpha', 'beta', 'gamma', 'pro-tetradic', 'pro-complementary', 'mix'}

    def test_is_immutable_value(self):
        assert alpha(BASE) == Palette(primary=BASE, secondary=complement(BASE), accent=analogous(BASE, 0, True))
