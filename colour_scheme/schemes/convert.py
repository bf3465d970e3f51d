"""Show the base colour as hex, RGB, HSL, CMYK and a 24-bit decimal.

Example:
    colour-scheme convert '#009cff'
    colour-scheme convert 0,156,255 --json
"""

from colour_scheme.core.codec import hex_to_dec, hex_to_rgb, rgb_to_cmyk, rgb_to_hsl
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(
    name='convert',
    help='Show the base colour as hex, RGB, HSL, CMYK and decimal.',
)


@scheme.run
def run(colour: str, report: Report, args) -> None:
    rgb = hex_to_rgb(colour)
    report.add(
        'convert',
        {
            'hex': colour,
            'rgb': rgb,
            'hsl': rgb_to_hsl(rgb),
            'cmyk': rgb_to_cmyk(rgb),
            'decimal': hex_to_dec(colour),
        },
    )
