"""Five-step monochrome ladder from one base colour.

Steps:
  1. Convert to HSL, take base_point = (saturation + lightness) / 2.
  2. Pick a hue nudge from the lightness band (HUE_NUDGES).
  3. Midpoint = (hue + nudge, base_point, base_point).
  4. Hues: midpoint hue -20, -10, 0, +10, +20.
  5. Saturations and lightnesses: interpolate between the original
     component and the midpoint using the rule for the band the original
     component falls in (BANDS), then fold into [0, period).
  6. Zip, convert, drop adjacent duplicates.

The band edges and per-band formulas are tuned by eye, not derived.
Keep them exactly as they are.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from colour_scheme.core.codec import encode, hsl_to_rgb, normalize_hue, rgb_to_hsl, to_rgb
from colour_scheme.core.errors import InvalidRange
from colour_scheme.core.types import HSL, Colour, ColourInput

T = TypeVar('T')

SATURATION_PERIOD = 1.0
LIGHTNESS_PERIOD = 0.7
HUE_STEPS = (-20, -10, 0, 10, 20)

# (predicate on lightness, hue nudge in degrees); first match wins
HUE_NUDGES: list[tuple[Callable[[float], bool], int]] = [
    (lambda x: 0.8 <= x <= 1, -20),
    (lambda x: 0.6 < x < 0.8, -10),
    (lambda x: 0.4 <= x <= 0.6, 0),
    (lambda x: 0.2 <= x < 0.4, 10),
    (lambda x: 0 <= x < 0.2, 20),
]


def _lowest(base: float, mid: float) -> list[float]:
    avg = (mid + base) / 2
    d = mid - avg
    return [base, avg, mid, mid + d, mid + d * 2]


def _low(base: float, mid: float) -> list[float]:
    d = mid - base
    return [base - d, base, mid, base + d, base + d * 2]


def _middle(base: float, mid: float) -> list[float]:
    d = 20
    return [base - d * 2, base - d, base, base + d, base + d * 2]


def _high(base: float, mid: float) -> list[float]:
    d = base - mid
    return [mid - d * 2, mid - d, mid, base, base + d]


def _highest(base: float, mid: float) -> list[float]:
    avg = (mid + base) / 2
    d = mid + avg
    return [mid - d * 2, mid - d, mid, avg, base]


# name, predicate on the original component, spacing rule
BANDS: list[tuple[str, Callable[[float], bool], Callable[[float, float], list[float]]]] = [
    ('lowest', lambda x: 0 <= x <= 0.2, _lowest),
    ('low', lambda x: 0.2 < x <= 0.4, _low),
    ('middle', lambda x: 0.4 < x < 0.6, _middle),
    ('high', lambda x: 0.6 <= x < 0.8, _high),
    ('highest', lambda x: 0.8 <= x <= 1, _highest),
]


def hue_nudge(lightness: float) -> int:
    for matches, nudge in HUE_NUDGES:
        if matches(lightness):
            return nudge
    raise InvalidRange(f'Lightness {lightness} outside [0, 1]')


def band_for(component: float) -> str:
    """Name of the band a saturation or lightness value falls in."""
    for name, matches, _rule in BANDS:
        if matches(component):
            return name
    raise InvalidRange(f'Component {component} outside [0, 1]')


def fold(value: float, period: float) -> float:
    """Fold |value| into [0, period), rounded to 4 places."""
    return round(abs(value) % period, 4)


def interpolate(base: float, mid: float, period: float = SATURATION_PERIOD) -> list[float]:
    """Five component values spaced around base and mid by the base's band rule."""
    for _name, matches, rule in BANDS:
        if matches(base):
            return [fold(v, period) for v in rule(base, mid)]
    raise InvalidRange(f'Component {base} outside [0, 1]')


def ladder(colour: ColourInput) -> list[HSL]:
    """The five raw HSL steps, before conversion and deduplication."""
    hsl = rgb_to_hsl(to_rgb(colour))
    base_point = (hsl.saturation + hsl.lightness) / 2
    mid = HSL(hsl.hue + hue_nudge(hsl.lightness), base_point, base_point)

    hues = [normalize_hue(mid.hue + step) for step in HUE_STEPS]
    saturations = interpolate(hsl.saturation, mid.saturation, SATURATION_PERIOD)
    lightnesses = interpolate(hsl.lightness, mid.lightness, LIGHTNESS_PERIOD)
    return [HSL(h, s, lum) for h, s, lum in zip(hues, saturations, lightnesses)]


def dedupe_adjacent(items: Sequence[T]) -> list[T]:
    """Drop items equal to their predecessor. Non-adjacent repeats stay."""
    out: list[T] = []
    for item in items:
        if not out or item != out[-1]:
            out.append(item)
    return out


def monochrome(colour: ColourInput, to_hex: bool = True) -> list[Colour]:
    """One to five tonal variants of the base colour, no two neighbours equal."""
    return dedupe_adjacent([encode(hsl_to_rgb(step), to_hex) for step in ladder(colour)])
