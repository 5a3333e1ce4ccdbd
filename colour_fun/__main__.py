"""colour-fun — colour conversion, contrast and comparison from the command line.

Usage: colour-fun <command> <colour> [<colour> ...] [options]

Commands are auto-discovered from colour_fun/commands/.
Each command module's docstring is its documentation.
Run `colour-fun help <command>` for full module docs.

Configuration / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-fun looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  COLOUR_FUN_JSON=1        JSON output by default
  COLOUR_FUN_PRECISION=N   decimal places in text output (default 2)
"""

import argparse
import sys

from colour_fun import registry
from colour_fun.core.config import load_settings
from colour_fun.core.report import format_json, format_text
from colour_fun.core.types import Report


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  colour-fun convert f43c8e\n'
        '  colour-fun convert rebeccapurple --json\n'
        '  colour-fun contrast 054\n'
        '  colour-fun compare 032bea 2b36e7\n'
        '  colour-fun valid fff abcde tomato\n'
        '  colour-fun help compare\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-fun',
        description='Colour conversion, contrast and comparison (RGB, HSL, Lab).',
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
        p = sub.add_parser(name, help=cmd.help)
        for operand in cmd.operands:
            if operand.endswith('...'):
                p.add_argument(operand[:-3], nargs='+')
            else:
                p.add_argument(operand)
        p.add_argument('-j', '--json', action='store_true', default=None, help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {cmd.help}')
        print('\nRun: colour-fun help <command> for full docs.')
        return

    if topic not in commands:
        print(f'colour-fun: unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.module_doc(topic)
    print(doc or f'(No module docs for {topic!r})')


def _operands(args: argparse.Namespace, operands: tuple[str, ...]) -> list[str]:
    values: list[str] = []
    for operand in operands:
        value = getattr(args, operand.rstrip('.'))
        values.extend(value if isinstance(value, list) else [value])
    return values


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        settings = load_settings(env_file=args.env_file)
    except ValueError as exc:
        print(f'colour-fun: {exc}', file=sys.stderr)
        sys.exit(2)
    if settings.env_path:
        print(f'colour-fun: loaded {settings.env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    cmd = registry.get(args.command)
    report = Report(command=cmd.name, inputs=_operands(args, cmd.operands))
    cmd.execute(args, report, settings)

    as_json = settings.json_output if args.json is None else args.json
    print(format_json(report) if as_json else format_text(report, precision=settings.precision))

    if report.failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
