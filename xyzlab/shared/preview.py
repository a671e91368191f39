#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/preview.py

import re

from xyzlab.core import config as c
from xyzlab.core.color import Color, RGBColor
from .truecolor import color_enabled

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    rgb = color.convert(RGBColor)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    # NO_COLOR: no swatch, just the aligned hex code
    if not color_enabled():
        print(f"{title}{padding}:   {rgb}", end=end)
        return

    swatch = c.BG_TRUECOLOR.format(r=rgb.r, g=rgb.g, b=rgb.b)
    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch}                {c.RESET}  {c.BOLD_WHITE}{rgb}{c.RESET}", end=end)
