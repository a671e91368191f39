#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/terminal.py

from typing import Optional, Protocol

from xyzlab.core import config as c


class ForegroundStyle(Protocol):
    """Produces the escape that sets a foreground color and the one that undoes it."""

    def set_foreground(self, r: int, g: int, b: int) -> str:
        ...

    def reset_foreground(self) -> str:
        ...


class AnsiTruecolorStyle:
    """24-bit SGR foreground codes understood by truecolor terminals."""

    def set_foreground(self, r: int, g: int, b: int) -> str:
        return c.FG_TRUECOLOR.format(r=r, g=g, b=b)

    def reset_foreground(self) -> str:
        return c.FG_RESET


class PlainStyle:
    """Emits no escapes at all, for NO_COLOR and redirected output."""

    def set_foreground(self, r: int, g: int, b: int) -> str:
        return ""

    def reset_foreground(self) -> str:
        return ""


_default_style: ForegroundStyle = AnsiTruecolorStyle()


def get_default_style() -> ForegroundStyle:
    return _default_style


def set_default_style(style: ForegroundStyle) -> ForegroundStyle:
    """Replace the process-wide style and return the previous one."""
    global _default_style
    previous = _default_style
    _default_style = style
    return previous


def colorize(text: str, r: int, g: int, b: int, style: Optional[ForegroundStyle] = None) -> str:
    """Wrap text in a foreground color and a foreground reset. Text is not sanitized."""
    if style is None:
        style = _default_style
    return f"{style.set_foreground(r, g, b)}{text}{style.reset_foreground()}"
