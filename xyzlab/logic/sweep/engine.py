#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/logic/sweep/engine.py

from typing import List

from xyzlab.core import config as c
from xyzlab.core.color import Color, RGBColor, XYZColor


def build_xyz_grid(
    steps: int = c.SWEEP_XYZ_STEPS,
    y: float = c.SWEEP_Y_DEFAULT,
) -> List[List[Color]]:
    """Rows of XYZ colors: X grows down the rows, Z grows along each row, Y is fixed."""
    last = max(steps - 1, 1)
    grid = []
    for i in range(steps):
        x = i * c.SWEEP_X_MAX / last
        grid.append([XYZColor(x, y, j * c.SWEEP_Z_MAX / last) for j in range(steps)])
    return grid


def build_rgb_grid(
    steps: int = c.SWEEP_RGB_STEPS,
    b: int = c.SWEEP_BLUE_DEFAULT,
) -> List[List[Color]]:
    """Rows of RGB colors stepping red by row and green by column, blue fixed."""
    top = c.RGB_CHANNEL_MAX
    return [
        [RGBColor(min(i * c.SWEEP_RGB_STRIDE, top), min(j * c.SWEEP_RGB_STRIDE, top), b)
         for j in range(steps)]
        for i in range(steps)
    ]
