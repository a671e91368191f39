#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/logic/sweep/renderer.py

from typing import List, Optional, Sequence

from xyzlab.core import config as c
from xyzlab.core.color import Color
from xyzlab.shared.terminal import ForegroundStyle


def render_grid(
    grid: Sequence[Sequence[Color]],
    cell: str = c.SWEEP_CELL,
    style: Optional[ForegroundStyle] = None,
) -> List[str]:
    """One line per grid row, each cell drawn in its own foreground color."""
    return ["".join(color.write_colored_str(cell, style) for color in row) for row in grid]
