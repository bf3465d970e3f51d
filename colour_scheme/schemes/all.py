"""Run every deterministic scheme and combine into a single report.

Runs: convert, complementary, analogous, triadic, tetradic, monochrome,
grayscale, equiv, lookup.
Skips: palette (pick a kind and run it explicitly).

Example:
    colour-scheme all 009cff
    colour-scheme all 009cff --json
"""

from colour_scheme.core.types import Report, Scheme

scheme = Scheme(name='all', help='Run every deterministic scheme. Combine into a single report.')

# Schemes never run automatically
SKIP = {'all', 'palette'}


@scheme.run
def run(colour: str, report: Report, args) -> None:
    from colour_scheme.registry import all_schemes

    for name, item in sorted(all_schemes().items()):
        if name in SKIP:
            continue
        item.execute(colour, report, args)
