#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/logic/convert/engine.py

import argparse
import sys

from xyzlab.core import config as c
from xyzlab.shared.logger import log
from xyzlab.shared.preview import print_color_block
from .resolver import to_color
from .renderer import arrow, render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    try:
        from_fmt = c.FORMAT_ALIASES[args.from_format]
        to_fmt = c.FORMAT_ALIASES[args.to_format]
    except KeyError as e:
        log("error", f"invalid format specified: {e}")
        log("info", "use 'xyzlab convert -h' to see all formats")
        sys.exit(2)

    if from_fmt not in c.FROM_FORMATS:
        log("error", f"'{args.from_format}' cannot be used as a source format")
        sys.exit(2)

    color = to_color(args.value, from_fmt)
    out = render_convert_info(color, to_fmt)

    if args.verbose:
        src = render_convert_info(color, from_fmt)
        print(f"{src} {arrow()} {out}")
    else:
        print(out)

    if args.swatch:
        print_color_block(color, title=to_fmt)
