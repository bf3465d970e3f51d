"""Three colours at hue+60°, hue+180° and hue+240°, each shifted by --offset.

Example:
    colour-scheme tetradic 009cff
"""

from colour_scheme.core.harmony import tetradic
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(
    name='tetradic',
    help='Three colours at 60°, 180° and 240° from the base, plus an optional offset.',
)


@scheme.run
def run(colour: str, report: Report, args) -> None:
    report.add('tetradic', {'colours': tetradic(colour, getattr(args, 'offset', 0), args.to_hex)})
