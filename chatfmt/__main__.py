"""chatfmt — preview group-aware chat formatting from the command line.

Usage: chatfmt [--config PATH] <renderer> MESSAGE --player NAME [options]

Renderers are auto-discovered from chatfmt/renderers/.
Each renderer module's docstring is its documentation.
Run `chatfmt help <renderer>` for full module docs.

Configuration:
  --config wins, then the CHATFMT_CONFIG environment variable, then
  ./config.toml. A missing file is created with the default settings.
"""

import argparse
import importlib
import logging
import sys

from chatfmt import registry
from chatfmt.core.config import load_settings
from chatfmt.core.formatter import ChatFormatter, format_plain, render_template
from chatfmt.core.palette import LEGACY_COLOURS, LEGACY_NAMES
from chatfmt.core.types import RichMessage, Sender


def _load_renderer_module(name: str) -> object:
    """Load the raw module for a renderer (for docstring access)."""
    return importlib.import_module(f'chatfmt.renderers.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_renderer_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    renderers = registry.all_renderers()

    epilog = (
        'Examples:\n'
        '  chatfmt ansi "hello" --player Ann\n'
        '  chatfmt ansi "hello" --player Ann --group vip --group admin\n'
        '  chatfmt json "hello" --player Ann --template "&c%player%&7: %message%"\n'
        '  chatfmt png "hello" --player Ann --out ./tmp\n'
        '  chatfmt --config server/config.toml plain "hello" --player Ann\n'
        '  chatfmt colours\n'
        '  chatfmt help png\n'
    )
    parser = argparse.ArgumentParser(
        prog='chatfmt',
        description='Preview group-aware chat formatting with &-colour codes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        default=None,
        help='Path to config.toml (default: $CHATFMT_CONFIG or ./config.toml)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log config loading details')
    sub = parser.add_subparsers(dest='renderer', help='Renderer to use')

    for name, rend in sorted(renderers.items()):
        p = sub.add_parser(name, help=_short_doc(name, rend.help))
        p.add_argument('message', help='Chat message text')
        p.add_argument('-p', '--player', required=True, help='Sender display name')
        p.add_argument(
            '-g',
            '--group',
            action='append',
            default=[],
            metavar='GROUP',
            help='Permission group of the sender (repeatable)',
        )
        p.add_argument('-t', '--template', help='Use this template instead of resolving one from groups')
        p.add_argument('-o', '--out', help='Output directory for file renderers (default: .)')

    help_parser = sub.add_parser('help', help='Print full docs for a renderer')
    help_parser.add_argument('command', nargs='?', help='Renderer name')

    sub.add_parser('colours', help='List the 16 legacy colour codes')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a renderer."""
    renderers = registry.all_renderers()

    if command is None:
        print('Available renderers:\n')
        for name, rend in sorted(renderers.items()):
            print(f'  {name:<8} {_short_doc(name, rend.help)}')
        print('\nRun: chatfmt help <renderer> for full docs.')
        return

    if command not in renderers:
        print(f'Unknown renderer: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(renderers))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_renderer_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _print_colours() -> None:
    for digit, (hex_val, name) in enumerate(zip(LEGACY_COLOURS, LEGACY_NAMES)):
        print(f'  &{digit:x}  {hex_val}  {name}')


def _format(args: argparse.Namespace) -> RichMessage:
    settings = load_settings(args.config)
    sender = Sender(id=args.player, name=args.player)

    if not settings.enabled:
        print('chatfmt: chat formatting is disabled in config', file=sys.stderr)
        return format_plain(sender, args.message)
    if args.template is not None:
        return render_template(args.template, sender.name, args.message)

    groups = set(args.group)
    formatter = ChatFormatter(settings, group_lookup=lambda _sender_id: groups)
    return formatter.format(sender, args.message)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='chatfmt: %(levelname)s %(message)s',
        stream=sys.stderr,
    )

    if not args.renderer:
        parser.print_help()
        sys.exit(1)

    if args.renderer == 'help':
        _print_help(getattr(args, 'command', None))
        return

    if args.renderer == 'colours':
        _print_colours()
        return

    message = _format(args)
    output = registry.get(args.renderer).execute(message, args)
    if output is not None:
        print(output)


if __name__ == '__main__':
    main()
