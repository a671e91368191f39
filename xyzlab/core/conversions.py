#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/core/conversions.py

from typing import Tuple

from . import config as c
from xyzlab.shared.clamping import _clamp01, round_half_away


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    return (
        c.SRGB_SLOPE * l_val
        if l_val <= c.LINEAR_TO_SRGB_TH
        else c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET
    )


def _srgb_to_linear(c_norm: float) -> float:
    """Linearize a normalized sRGB component."""
    return (
        c_norm / c.SRGB_SLOPE
        if c_norm <= c.SRGB_TO_LINEAR_TH
        else ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA
    )


def _to_8bit(v: float) -> int:
    """Clamp an encoded channel to [0, 1] and scale it to an 8-bit integer."""
    return round_half_away(_clamp01(v) * c.RGB_MAX)


def xyz_to_rgb(x: float, y: float, z: float) -> Tuple[int, int, int]:
    """Convert CIE XYZ to 8-bit sRGB.

    Out-of-gamut colors are clamped channel by channel after gamma encoding,
    so the result is always a valid 8-bit triple. NaN channels become 0.
    """
    r_lin = x * c.M_XYZ_SRGB_R[0] + y * c.M_XYZ_SRGB_R[1] + z * c.M_XYZ_SRGB_R[2]
    g_lin = x * c.M_XYZ_SRGB_G[0] + y * c.M_XYZ_SRGB_G[1] + z * c.M_XYZ_SRGB_G[2]
    b_lin = x * c.M_XYZ_SRGB_B[0] + y * c.M_XYZ_SRGB_B[1] + z * c.M_XYZ_SRGB_B[2]
    r = _linear_to_srgb(r_lin)
    g = _linear_to_srgb(g_lin)
    b = _linear_to_srgb(b_lin)
    return _to_8bit(r), _to_8bit(g), _to_8bit(b)


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert 8-bit sRGB to CIE XYZ (Y of white is 1.0)."""
    r_lin = _srgb_to_linear(r / c.RGB_MAX)
    g_lin = _srgb_to_linear(g / c.RGB_MAX)
    b_lin = _srgb_to_linear(b / c.RGB_MAX)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to hex string."""
    return f"{r:02X}{g:02X}{b:02X}"
