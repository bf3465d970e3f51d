"""Name the base colour, or find the nearest named colour.

Uses the CSS named colours unless --names (or COLOUR_SCHEME_NAMES)
points at a JSON dataset: either {"name": "#hex"} or a list of
{"name": ..., "hex": ...} records.

Exact matches report the name only. Otherwise the nearest entry by RGB
Euclidean distance is reported with its value and distance.

Example:
    colour-scheme lookup ff0000
    colour-scheme lookup 009cff --names colornames.json
"""

from colour_scheme.core.names import load_names, lookup
from colour_scheme.core.types import Report, Scheme

scheme = Scheme(name='lookup', help='Name the base colour, or find the nearest named colour.')


@scheme.run
def run(colour: str, report: Report, args) -> None:
    names_path = getattr(args, 'names', None)
    names = load_names(names_path) if names_path else None
    result = lookup(colour, names=names)
    if isinstance(result, str):
        report.add('lookup', {'name': result})
    else:
        report.add('lookup', {'nearest': result})
