#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/subcommands/command_registry.py

from . import (
    convert,
    sweep
)

SUBCOMMANDS = {
    'convert': convert,
    'sweep': sweep
}
