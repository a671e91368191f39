#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/formatting.py

from xyzlab.core.conversions import rgb_to_hex


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'xyz':
        return f"xyz({args[0]:.4f}, {args[1]:.4f}, {args[2]:.4f})"
    elif fmt == 'hex':
        return f"#{rgb_to_hex(args[0], args[1], args[2])}"

    return ""
