"""Grey with the base colour's lightness.

Example:
    colour-scheme grayscale 009cff
"""

from colour_scheme.core.harmony import grayscale
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(name='grayscale', help='Grey with the base colour lightness.')


@scheme.run
def run(colour: str, report: Report, args) -> None:
    report.add('grayscale', {'colour': grayscale(colour, args.to_hex)})
