"""css-colours — CSS rgb()/rgba() colour values from the command line.

Usage: css-colours <command> [args] [options]

Commands are listed in css_colours/commands/__init__.py.
Each command module's docstring is its documentation.
Run `css-colours help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, css-colours looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from css_colours import registry
from css_colours.core.env import load_env, output_format
from css_colours.core.report import format_json, format_text


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'css_colours.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  css-colours rgb 250 128 114\n'
        '  css-colours rgba 250 128 114 0.5 --json\n'
        '  css-colours sample screenshot.png 10 20\n'
        '  css-colours average screenshot.png\n'
        '  css-colours swatch ./salmon.png 250 128 114 --size 16\n'
        '  css-colours help sample\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  CSS_COLOURS_FORMAT=text|json   default output format\n'
        '  CSS_COLOURS_SWATCH_SIZE=64     default swatch edge length\n'
    )
    parser = argparse.ArgumentParser(
        prog='css-colours',
        description='CSS rgb()/rgba() colour values from the command line.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of CSS text')

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
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: css-colours help <command> for full docs.')
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


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'css-colours: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    cmd = registry.get(args.command)
    try:
        colour = cmd.execute(args)
    except (OSError, IndexError, ValueError) as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json or output_format() == 'json':
        print(format_json(colour))
    else:
        print(format_text(colour))


if __name__ == '__main__':
    main()
