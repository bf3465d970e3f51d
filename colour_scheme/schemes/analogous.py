"""Reflected neighbour of the base colour at hue (180 - (hue + offset)) mod 360.

The offset is clamped to [0, 90]. Note this is a reflection, not the
usual ±30° neighbour.

Example:
    colour-scheme analogous ff0000
    colour-scheme analogous ff0000 --offset 30
"""

from colour_scheme.core.harmony import analogous
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(
    name='analogous',
    help='Reflected neighbour at hue (180 - (hue + offset)), offset clamped to [0, 90].',
)


@scheme.run
def run(colour: str, report: Report, args) -> None:
    offset = getattr(args, 'offset', 0)
    report.add('analogous', {'offset': offset, 'colour': analogous(colour, offset, args.to_hex)})
