#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/logic/convert/resolver.py

import sys

from xyzlab.core.color import Color, RGBColor, XYZColor
from xyzlab.shared.logger import log
from xyzlab.shared.parser import STRING_PARSERS

COLOR_TYPES = {
    "rgb": RGBColor,
    "xyz": XYZColor,
}


def to_color(val: str, fmt: str) -> Color:
    """Parse a textual value in the given source format into a color value."""
    if fmt not in STRING_PARSERS:
        log("error", f"'{fmt}' is not a valid source format")
        sys.exit(2)
    try:
        nums = STRING_PARSERS[fmt](val)
    except ValueError as e:
        log("error", str(e))
        sys.exit(2)
    return COLOR_TYPES[fmt].from_sequence(nums)
