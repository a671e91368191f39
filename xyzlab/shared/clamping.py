#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def round_half_away(v: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))
