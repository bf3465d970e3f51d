"""Assemble a named palette (primary / secondary / accent / neutral).

Kinds (--kind):
  alpha              base, complement, analogous reflection (--offset)
  beta               base, triadic pair (--offset), accents at 45/90/135°
  gamma              beta with the triadic pair turned a further 25°
  pro-tetradic       monochrome ladders of the base and its tetradic colours
  pro-complementary  monochrome ladders of the base and its split pair
  mix                random pick from base/analogous/split pair, random accents

mix (and a missing base colour) draw from the random generator; use
--seed or COLOUR_SCHEME_SEED for repeatable output.

Example:
    colour-scheme palette 009cff --kind beta
    colour-scheme palette --kind mix --seed 7 --json
"""

from colour_scheme.core.palette import PALETTES
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(name='palette', help='Assemble a named palette: alpha, beta, gamma, pro-*, mix.')

# Kinds that take a hue offset
_WITH_OFFSET = {'alpha', 'beta', 'gamma', 'pro-tetradic'}


@scheme.run
def run(colour: str, report: Report, args) -> None:
    kind = getattr(args, 'kind', 'alpha')
    if kind not in PALETTES:
        raise KeyError(f'Unknown palette kind: {kind}. Available: {", ".join(PALETTES)}')
    build = PALETTES[kind]
    rng = getattr(args, 'rng', None)
    if kind in _WITH_OFFSET:
        result = build(colour, getattr(args, 'offset', 0), args.to_hex, rng=rng)
    else:
        result = build(colour, args.to_hex, rng=rng)
    report.add('palette', {'kind': kind, 'roles': result.as_dict()})
