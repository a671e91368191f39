#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/__init__.py

from xyzlab.core.color import Color, RGBColor, XYZColor

__version__ = "v0.1.0"

__all__ = ["Color", "RGBColor", "XYZColor", "__version__"]
