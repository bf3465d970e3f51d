"""Shift the packed 24-bit colour value by a fraction of the circle.

--angle 90 adds a quarter of 0xffffff to the colour's decimal value
(modulo 0xffffff). This is integer arithmetic, not a hue rotation.

Example:
    colour-scheme equiv 009cff --angle 90
"""

from colour_scheme.core.codec import colour_equiv_angle
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(
    name='equiv',
    help='Shift the 24-bit colour value by angle/360 of 0xffffff.',
)


@scheme.run
def run(colour: str, report: Report, args) -> None:
    angle = getattr(args, 'angle', 0)
    report.add('equiv', {'angle': angle, 'colour': colour_equiv_angle(colour, angle)})
