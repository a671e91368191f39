#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/logic/convert/renderer.py

from xyzlab.core import config as c
from xyzlab.core.color import Color, RGBColor, XYZColor
from xyzlab.shared.formatting import format_colorspace
from xyzlab.shared.truecolor import color_enabled


def bold(text) -> str:
    if not color_enabled():
        return str(text)
    return f"{c.BOLD_WHITE}{text}{c.RESET}"


def arrow() -> str:
    if not color_enabled():
        return "->"
    return f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}"


def render_convert_info(color: Color, fmt: str) -> str:
    """Converts a color into the target format and returns it as bold text."""
    if fmt == "xyz":
        return bold(format_colorspace("xyz", *color.convert(XYZColor)))
    if fmt == "rgb":
        return bold(format_colorspace("rgb", *color.convert(RGBColor)))
    if fmt == "hex":
        return bold(format_colorspace("hex", *color.convert(RGBColor)))

    return ""
