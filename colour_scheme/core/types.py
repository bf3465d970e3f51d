"""Shared types for colour-scheme: RGB, HSL, CMYK, Palette, NearestMatch, Scheme, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class RGB:
    """An sRGB colour with integer channels in [0, 255]."""

    red: int
    green: int
    blue: int
    alpha: float | None = None  # carried through, never used in hue math

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class HSL:
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""

    hue: float
    saturation: float
    lightness: float


@dataclass(frozen=True)
class CMYK:
    """Subtractive colour, every component in [0, 1]."""

    c: float
    m: float
    y: float
    k: float


# A hex string ('#abc', 'aabbcc') or an RGB record.
ColourInput = Union[str, RGB]

# What colour-producing functions return, chosen by their to_hex flag.
Colour = Union[str, RGB]


@dataclass(frozen=True)
class NearestMatch:
    """Closest named colour to an unnamed input."""

    name: str
    value: str  # '#rrggbb' of the named entry
    distance: float  # RGB Euclidean, rounded to 4 places


@dataclass(frozen=True)
class Palette:
    """Colours grouped under semantic roles.

    Each role holds a single colour or an ordered sequence of colours
    (or, for pro palettes, a sequence of tonal ladders).
    """

    primary: Any
    secondary: Any
    accent: Any
    neutral: Any = None

    def as_dict(self) -> dict[str, Any]:
        out = {'primary': self.primary, 'secondary': self.secondary, 'accent': self.accent}
        if self.neutral is not None:
            out['neutral'] = self.neutral
        return out


class Scheme:
    """A self-registering CLI subcommand.

    Usage in a scheme module:

        scheme = Scheme(name='triadic', help='Two colours 120 and 240 degrees away')

        @scheme.run
        def run(colour, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colour: str, report: Report, args: Any) -> None:
        """Execute the scheme's run function against a normalized hex colour."""
        if self._run_fn is None:
            raise RuntimeError(f'Scheme {self.name} has no run function')
        self._run_fn(colour, report, args)


@dataclass
class Report:
    """Accumulates results from schemes for text/JSON output."""

    colour: str = ''  # normalized 6-digit hex of the base colour
    source: str | None = None  # raw input as typed, or None when drawn at random
    results: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, scheme_name: str, data: dict[str, Any]) -> None:
        """Add (or extend) results for a scheme."""
        self.results.setdefault(scheme_name, {}).update(data)
