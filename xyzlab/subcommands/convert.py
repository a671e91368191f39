#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/subcommands/convert.py

import argparse
import sys

from xyzlab.core import config as c
from xyzlab.logic.convert import engine
from xyzlab.shared.formatting import format_colorspace
from xyzlab.shared.logger import XyzlabArgumentParser
from xyzlab.shared.sanitizer import INPUT_HANDLERS
from xyzlab.shared.truecolor import ensure_truecolor


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = XyzlabArgumentParser(
        prog="xyzlab convert",
        description="xyzlab convert: convert a color value from one format to another",
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
        "-f",
        "--from-format",
        required=True,
        type=INPUT_HANDLERS["from_format"],
        help="the format to convert from\n" f"all formats: {' '.join(c.FROM_FORMATS)}",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        help="the format to convert to\n" f"all formats: {' '.join(c.TO_FORMATS)}",
    )
    parser.add_argument(
        "-v",
        "--value",
        required=True,
        type=str,
        help=(
            "color value to convert must be in quotes\n"
            "examples:\n"
            f'  -v "{format_colorspace("rgb", 45, 28, 156)}"\n'
            f'  -v "{format_colorspace("xyz", 0.41874, 0.21967, 0.05649)}"'
        ),
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    parser.add_argument(
        "-s",
        "--swatch",
        action="store_true",
        help="print a color swatch of the result",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
