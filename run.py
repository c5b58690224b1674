#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four
"""

import argparse
import sys

from connectfour.debug import debug, DebugLevel
from connectfour.interfaces.cli import TextClient, DEFAULT_COLORS


def configure_debug(args):
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
    play_parser.add_argument('--colors', nargs=2, metavar=('FIRST', 'SECOND'),
                             default=list(DEFAULT_COLORS),
                             help='Disk colors for player 1 and player 2')

    play_parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    play_parser.add_argument('--debug-level', default='warning',
                             choices=[level.name.lower() for level in DebugLevel],
                             help='Logging level')
    play_parser.add_argument('--log-file', help='Also write log messages to this file')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != 'play':
        parser.print_help()
        return 1

    configure_debug(args)
    return TextClient(colors=args.colors).play()


if __name__ == "__main__":
    sys.exit(main())
