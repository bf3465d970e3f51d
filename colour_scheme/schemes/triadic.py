"""Two colours at hue+120°+offset and hue+240°+offset.

--offsets a,b applies a separate offset to each colour instead of --offset.

Example:
    colour-scheme triadic 009cff
    colour-scheme triadic 009cff --offset 25
    colour-scheme triadic 009cff --offsets 10,-10
"""

from colour_scheme.core.harmony import triadic
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(
    name='triadic',
    help='Two colours at 120° and 240° from the base, plus an optional offset.',
)


@scheme.run
def run(colour: str, report: Report, args) -> None:
    offsets = getattr(args, 'offsets', None)
    offset = offsets if offsets else getattr(args, 'offset', 0)
    report.add('triadic', {'colours': triadic(colour, offset, args.to_hex)})
