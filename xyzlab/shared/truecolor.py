#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/truecolor.py

import os
import sys

from .terminal import AnsiTruecolorStyle, ForegroundStyle, PlainStyle


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def color_enabled() -> bool:
    """False when NO_COLOR is set (any non-empty value), see https://no-color.org."""
    if os.environ.get("NO_COLOR"):
        return False
    return True


def style_for_environment() -> ForegroundStyle:
    if color_enabled():
        return AnsiTruecolorStyle()
    return PlainStyle()
