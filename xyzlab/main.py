#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/main.py

import argparse
import sys

from xyzlab import __version__
from xyzlab.subcommands.command_registry import SUBCOMMANDS
from xyzlab.shared.logger import log, XyzlabArgumentParser
from xyzlab.shared.truecolor import ensure_truecolor


def get_root_parser() -> argparse.ArgumentParser:
    """Create argument parser for the bare xyzlab command."""
    parser = XyzlabArgumentParser(
        prog="xyzlab",
        description=(
            "xyzlab: convert colors through CIE XYZ and preview them in the terminal\n"
            f"subcommands: {' '.join(SUBCOMMANDS)}"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"xyzlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_root_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for xyzlab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_root_parser()
    args = parser.parse_args()
    handle_root_command(args, parser)


if __name__ == "__main__":
    main()
