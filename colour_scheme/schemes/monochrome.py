"""Tonal ladder of the base colour: up to five variants of one hue.

Saturation and lightness are spread around a midpoint chosen from the
base colour's lightness band. Adjacent duplicates are dropped, so dark
or washed-out colours can yield fewer than five entries.

Example:
    colour-scheme monochrome 009cff
"""

from colour_scheme.core.monochrome import monochrome
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(
    name='monochrome',
    help='Up to five tonal variants of the base colour.',
)


@scheme.run
def run(colour: str, report: Report, args) -> None:
    report.add('monochrome', {'colours': monochrome(colour, args.to_hex)})
