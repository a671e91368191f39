#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/parser.py

import math
import re
from typing import List, Tuple

from xyzlab.core import config as c
from .clamping import round_half_away


def _normalize_value_string(s: str) -> str:
    """
    Normalizes the input color string to make numerical extraction easier.
    Strips quotes and unwraps function syntax ('rgb(255, 0, 0)' -> '255 0 0').
    """
    if not s:
        return ""
    s = s.strip()

    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()

    s = re.sub(r'^[a-zA-Z]+\s*\(', '', s)
    s = s.rstrip(')')

    s = s.replace(',', ' ')
    s = s.replace('/', ' ')
    s = re.sub(r'\s+', ' ', s)
    return s.strip()


def _parse_numerical_string(s: str) -> List[float]:
    """Extracts all finite numbers from a string, scientific notation included."""
    norm = _normalize_value_string(s)
    # [-+]? sign, \d*\.?\d+ integer or decimal, then an optional exponent
    pattern = r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?"
    tokens = [float(m) for m in re.findall(pattern, norm)]
    if not tokens or not all(math.isfinite(v) for v in tokens):
        raise ValueError(f"could not parse numerical values from '{s}'")
    return tokens


def parse_rgb_string(s: str) -> Tuple[int, int, int]:
    """Parses RGB strings, scaling float representations (0.0-1.0) to 8-bit integers (0-255)."""
    nums = _parse_numerical_string(s)
    if len(nums) < 3:
        raise ValueError(f"invalid rgb string: {s}")

    def _to_8bit(val: float) -> int:
        if 0.0 < val < 1.0:
            v = val * c.RGB_MAX
        else:
            v = val
        return max(c.RGB_CHANNEL_MIN, min(c.RGB_CHANNEL_MAX, round_half_away(v)))

    return _to_8bit(nums[0]), _to_8bit(nums[1]), _to_8bit(nums[2])


def parse_xyz_string(s: str) -> Tuple[float, float, float]:
    nums = _parse_numerical_string(s)
    if len(nums) < 3:
        raise ValueError(f"invalid xyz string: {s}")
    return nums[0], nums[1], nums[2]


STRING_PARSERS = {
    'rgb': parse_rgb_string,
    'xyz': parse_xyz_string,
}
