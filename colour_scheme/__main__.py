"""colour-scheme — harmonious colours and palettes from one base colour.

Usage: colour-scheme <scheme> [colour] [options]

The colour is a hex string ('#abc', '009cff') or 'r,g,b'. When omitted,
a random base colour is drawn (see --seed).

Schemes are auto-discovered from colour_scheme/schemes/.
Each scheme module's docstring is its documentation.
Run `colour-scheme help <scheme>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-scheme looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import re
import sys

import numpy as np

from colour_scheme import registry
from colour_scheme.core.codec import normalize
from colour_scheme.core.env import Settings, load_env
from colour_scheme.core.palette import PALETTES, random_colour
from colour_scheme.core.report import format_json, format_text
from colour_scheme.core.types import RGB, ColourInput, Report

_RGB_TRIPLE = re.compile(r'^\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*$')


def _load_scheme_module(name: str) -> object:
    """Load the raw module for a scheme (for docstring access)."""
    return importlib.import_module(f'colour_scheme.schemes.{name.replace("-", "_")}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_scheme_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _number_list(text: str) -> list[float]:
    """argparse type for '10,20,30'."""
    try:
        return [float(part) for part in text.split(',') if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f'expected comma-separated numbers, got {text!r}') from exc


def parse_colour_arg(text: str) -> ColourInput:
    """'0,156,255' -> RGB(0, 156, 255); anything else is treated as hex."""
    m = _RGB_TRIPLE.match(text)
    if m:
        return RGB(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    return text


def _build_parser() -> argparse.ArgumentParser:
    schemes = registry.all_schemes()

    epilog = (
        'Examples:\n'
        '  colour-scheme convert 009cff\n'
        '  colour-scheme complementary 009cff --variation 2\n'
        '  colour-scheme triadic 0,156,255 --offset 25 --rgb\n'
        '  colour-scheme monochrome "#abc" --json\n'
        '  colour-scheme palette --kind mix --seed 7\n'
        '  colour-scheme all 009cff\n'
        '  colour-scheme help palette\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  COLOUR_SCHEME_SEED    integer seed for random colours\n'
        '  COLOUR_SCHEME_FORMAT  hex (default) or rgb\n'
        '  COLOUR_SCHEME_NAMES   JSON named-colour dataset for lookup\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-scheme',
        description='Harmonious colours and palettes from one base colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='scheme', help='Scheme to run')

    # Auto-register each scheme as a subcommand using module docstring
    for name, item in sorted(schemes.items()):
        p = sub.add_parser(name, help=_short_doc(name, item.help))
        p.add_argument('colour', nargs='?', default=None, help="Base colour: hex or 'r,g,b' (default: random)")
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('--rgb', action='store_true', help='Output RGB records instead of hex')
        p.add_argument('-o', '--offset', type=float, default=0.0, help='Hue offset in degrees (default: 0)')
        p.add_argument('--offsets', type=_number_list, default=None, help='Per-colour triadic offsets: a,b')
        p.add_argument('-v', '--variation', type=int, choices=(1, 2), default=1, help='Complementary variation')
        p.add_argument('-a', '--angles', type=_number_list, default=None, help='Explicit hue offsets: a,b,c')
        p.add_argument('--angle', type=float, default=0.0, help='Angle for equiv (default: 0)')
        p.add_argument('-k', '--kind', choices=sorted(PALETTES), default='alpha', help='Palette kind')
        p.add_argument('-s', '--seed', type=int, default=None, help='Random seed (overrides COLOUR_SCHEME_SEED)')
        p.add_argument('-n', '--names', default=None, help='JSON named-colour dataset for lookup')

    # `help` subcommand prints the full module docstring for a scheme
    help_parser = sub.add_parser('help', help='Print full docs for a scheme')
    help_parser.add_argument('command', nargs='?', help='Scheme name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a scheme."""
    schemes = registry.all_schemes()

    if command is None:
        print('Available schemes:\n')
        for name, item in sorted(schemes.items()):
            print(f'  {name:<14} {_short_doc(name, item.help)}')
        print('\nRun: colour-scheme help <scheme> for full docs.')
        return

    if command not in schemes:
        print(f'Unknown scheme: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(schemes))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_scheme_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colour-scheme: loaded {env_path}', file=sys.stderr)

    if not args.scheme:
        parser.print_help()
        sys.exit(1)

    if args.scheme == 'help':
        _print_help(getattr(args, 'command', None))
        return

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    seed = args.seed if args.seed is not None else settings.seed
    args.rng = np.random.default_rng(seed)
    args.to_hex = settings.to_hex and not args.rgb
    if args.names is None:
        args.names = settings.names_file

    try:
        if args.colour is None:
            colour = random_colour(args.rng)
            print(f'colour-scheme: random base colour #{colour}', file=sys.stderr)
        else:
            colour = normalize(parse_colour_arg(args.colour))

        report = Report(colour=colour, source=args.colour)
        registry.get(args.scheme).execute(colour, report, args)
    except (ValueError, OSError) as exc:
        # ColourError and malformed --names JSON are both ValueErrors
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report), end='')


if __name__ == '__main__':
    main()
