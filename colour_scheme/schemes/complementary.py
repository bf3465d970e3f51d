"""Colour(s) opposite the base on the hue wheel.

--variation 1 (default) gives the 180° complement.
--variation 2 gives the split pair at 150° and 210°.
--angles a,b,c gives one colour per explicit hue offset and overrides --variation.

Example:
    colour-scheme complementary 009cff
    colour-scheme complementary 009cff --variation 2 --rgb
    colour-scheme complementary 009cff --angles 60,90,120,270
"""

from colour_scheme.core.harmony import complementary
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(
    name='complementary',
    help='Complement (180°), split pair (150°/210°) or explicit hue offsets.',
)


@scheme.run
def run(colour: str, report: Report, args) -> None:
    angles = getattr(args, 'angles', None)
    variation = angles if angles else getattr(args, 'variation', 1)
    result = complementary(colour, variation, args.to_hex)
    key = 'colour' if variation == 1 else 'colours'
    report.add('complementary', {key: result})
