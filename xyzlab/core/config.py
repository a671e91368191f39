#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Standard Scaling Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
RGB_CHANNEL_MIN = 0                # Lowest storable 8-bit channel value
RGB_CHANNEL_MAX = 255              # Highest storable 8-bit channel value

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ to sRGB Matrix (Source: sRGB D65, 2-degree observer, 4-digit form)
M_XYZ_SRGB_R = (3.2406, -1.5372, -0.4986)    # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.9689, 1.8758, 0.0415)     # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.0557, -0.2040, 1.0570)     # Coefficients for linear Blue component calculation

# sRGB to XYZ Matrix (Source: sRGB D65, 2-degree observer, 4-digit form)
M_SRGB_XYZ_X = (0.4124, 0.3576, 0.1805)      # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126, 0.7152, 0.0722)      # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193, 0.1192, 0.9505)      # Coefficients for Z coordinate calculation

# XYZ D65 Reference White, normalized to Y = 1 (Source: ASTM E308-01 / CIE D65)
D65_X = 0.95047
D65_Y = 1.0
D65_Z = 1.08883

# ==========================================
# Palette Sweep Defaults
# ==========================================

SWEEP_X_MAX = 0.94                 # Upper X bound of the XYZ sweep grid
SWEEP_Z_MAX = D65_Z                # Upper Z bound of the XYZ sweep grid
SWEEP_Y_DEFAULT = 0.5              # Fixed luminance for the XYZ sweep grid
SWEEP_XYZ_STEPS = 21               # Grid side length for the XYZ sweep
SWEEP_RGB_STEPS = 8                # Grid side length for the RGB sweep
SWEEP_RGB_STRIDE = 16              # Channel increment between RGB sweep cells
SWEEP_BLUE_DEFAULT = 128           # Fixed blue channel for the RGB sweep grid
SWEEP_CELL = "■"                   # Glyph printed for each sweep cell
MIN_STEPS = 2                      # Smallest sweep grid side
MAX_STEPS = 256                    # Largest sweep grid side

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Source and target formats for the 'convert' command
FROM_FORMATS = ["rgb", "xyz"]
TO_FORMATS = ["rgb", "xyz", "hex"]

# Format aliases for 'convert' command
FORMAT_ALIASES = {
    'rgb': 'rgb',
    'srgb': 'rgb',
    'xyz': 'xyz',
    'ciexyz': 'xyz',
    'hex': 'hex',
}

# Colorspaces accepted by the 'sweep' command
SWEEP_SPACES = ["xyz", "rgb"]

# ANSI Terminal Styling
ESC = "\033"
FG_TRUECOLOR = ESC + "[38;2;{r};{g};{b}m"   # SGR 38;2 truecolor foreground
BG_TRUECOLOR = ESC + "[48;2;{r};{g};{b}m"   # SGR 48;2 truecolor background
FG_RESET = ESC + "[39m"                      # SGR 39 default foreground

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
