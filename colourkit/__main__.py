"""colourkit — CIE LAB colour conversion and CIE94 colour difference.

Usage: colourkit <command> [colours...] [options]

Colours are LAB literals on the colourkit scale (l = L*/100, a = a*/100,
b = b*/100) or hex sRGB, optionally named:
  colourkit convert 'lab(0.5, 0.55, 0.55)' 'accent=#2563eb'
  colourkit distance -P labels.palette --min-distance 0.1

Commands are auto-discovered from colourkit/commands/.
Each command module's docstring is its documentation.
Run `colourkit help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colourkit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from colourkit import registry
from colourkit.core.env import Settings, load_env, read_settings
from colourkit.core.palette_parser import parse_colour_arg, parse_palette_file
from colourkit.core.report import format_json, format_text
from colourkit.core.types import NamedColour, Report

# Commands that run the distance check and accept --min-distance
GATED_COMMANDS = {'all', 'distance'}


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colourkit.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colourkit convert 'lab(0.5, 0.55, 0.55)' '#2563eb'\n"
        '  colourkit gray -P labels.palette\n'
        '  colourkit distance -P labels.palette --min-distance 0.1\n'
        '  colourkit all -P labels.palette --json\n'
        '  colourkit swatch -P labels.palette -o ./tmp\n'
        '  colourkit help distance\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  COLOURKIT_PRECISION=4        decimals in output\n'
        '  COLOURKIT_MIN_DISTANCE=0.1   default --min-distance\n'
        '  COLOURKIT_JSON=1             default to --json\n'
    )
    parser = argparse.ArgumentParser(
        prog='colourkit',
        description='CIE LAB colour conversion and CIE94 colour difference.',
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
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        p.add_argument('colours', nargs='*', help="Colour literals: 'lab(l, a, b)', 'l,a,b', '#rrggbb', or name=...")
        p.add_argument('-P', '--palette', help='Path to .palette file')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-o', '--out-dir', default=None, help='Directory for artefacts (swatch)')
        p.add_argument(
            '-g',
            '--gray-threshold',
            type=float,
            default=None,
            metavar='N',
            help='Chroma below N counts as neutral (default 0.05)',
        )
        if name in GATED_COMMANDS:
            p.add_argument(
                '-m',
                '--min-distance',
                type=float,
                default=None,
                metavar='N',
                help='Exit 1 if any colour is closer than N (CIE94) to another (CI gating)',
            )

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: colourkit help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _check_min_distance(report: Report, threshold: float) -> bool:
    """Return True if any colour is closer than threshold to another."""
    failures = []
    for colour_name, colour_data in report.colours.items():
        data = colour_data.get('commands', {}).get('distance', {})
        if data.get('pass') is False:
            failures.append((colour_name, data['nearest'], data['min_distance']))

    if failures:
        print(f'\nFAIL: {len(failures)} colour(s) closer than {threshold}:', file=sys.stderr)
        for colour_name, nearest, dist in failures:
            print(f'  {colour_name} ~ {nearest}: Δ={dist:.4f}', file=sys.stderr)
        return True
    return False


def _load_colours(args: argparse.Namespace) -> tuple[list[NamedColour], Report]:
    """Collect colours from --palette then positional arguments."""
    report = Report()
    colours: list[NamedColour] = []

    if args.palette:
        palette = parse_palette_file(args.palette)
        report.palette_name = palette.name
        report.palette_path = args.palette
        colours.extend(palette.colours)

    for text in args.colours:
        colours.append(parse_colour_arg(text))

    seen: set[str] = set()
    for colour in colours:
        if colour.name in seen:
            raise ValueError(f'Duplicate colour name: {colour.name}')
        seen.add(colour.name)
        report.set_lab(colour.name, colour.lab)

    return colours, report


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colourkit: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    try:
        settings: Settings = read_settings()
        colours, report = _load_colours(args)
    except (OSError, ValueError) as e:
        print(f'colourkit: {e}', file=sys.stderr)
        sys.exit(1)

    if not colours:
        print('colourkit: no colours given (pass literals or --palette)', file=sys.stderr)
        sys.exit(1)

    gated = args.command in GATED_COMMANDS
    if gated and args.min_distance is None:
        args.min_distance = settings.min_distance

    cmd = registry.get(args.command)
    cmd.execute(colours, report, args)

    if args.json or settings.json:
        print(format_json(report, settings.precision))
    else:
        print(format_text(report, settings.precision))

    # CI gate — must happen after output so report is visible even on failure
    if gated and args.min_distance is not None and _check_min_distance(report, args.min_distance):
        sys.exit(1)


if __name__ == '__main__':
    main()
