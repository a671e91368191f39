#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/subcommands/sweep.py

import argparse
import sys

from xyzlab.core import config as c
from xyzlab.logic.sweep.engine import build_rgb_grid, build_xyz_grid
from xyzlab.logic.sweep.renderer import render_grid
from xyzlab.shared.logger import XyzlabArgumentParser, log
from xyzlab.shared.sanitizer import INPUT_HANDLERS
from xyzlab.shared.truecolor import ensure_truecolor, style_for_environment


def get_sweep_parser() -> argparse.ArgumentParser:
    """Create argument parser for sweep command."""
    parser = XyzlabArgumentParser(
        prog="xyzlab sweep",
        description="xyzlab sweep: print a grid of colors swept across a colorspace",
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
        "-cs",
        "--colorspace",
        default="xyz",
        type=INPUT_HANDLERS["colorspace"],
        help=f"colorspace to sweep (default: xyz)\nall colorspaces: {' '.join(c.SWEEP_SPACES)}",
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=None,
        help=(
            f"cells per grid side (default: {c.SWEEP_XYZ_STEPS} for xyz, "
            f"{c.SWEEP_RGB_STEPS} for rgb, max: {c.MAX_STEPS})"
        ),
    )
    parser.add_argument(
        "-y",
        "--luminance",
        type=INPUT_HANDLERS["luminance"],
        default=c.SWEEP_Y_DEFAULT,
        help=f"fixed Y for the xyz sweep (default: {c.SWEEP_Y_DEFAULT})",
    )
    parser.add_argument(
        "-b",
        "--blue",
        type=INPUT_HANDLERS["channel"],
        default=c.SWEEP_BLUE_DEFAULT,
        help=f"fixed blue channel for the rgb sweep (default: {c.SWEEP_BLUE_DEFAULT})",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    if args.colorspace == "xyz":
        grid = build_xyz_grid(args.steps or c.SWEEP_XYZ_STEPS, args.luminance)
    elif args.colorspace == "rgb":
        grid = build_rgb_grid(args.steps or c.SWEEP_RGB_STEPS, args.blue)
    else:
        log("error", f"invalid colorspace '{args.colorspace}'")
        log("info", f"use one of: {' '.join(c.SWEEP_SPACES)}")
        sys.exit(2)

    for line in render_grid(grid, style=style_for_environment()):
        print(line)


def main() -> None:
    """Main entry point for sweep command."""
    parser = get_sweep_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()
