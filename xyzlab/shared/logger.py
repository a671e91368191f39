#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/logger.py

import argparse
import sys
from typing import TextIO

from xyzlab.core import config as c
from .truecolor import color_enabled

STDOUT_LEVELS = ("info", "success")


def format_message(level: str, message: str, color: bool = True) -> str:
    """Build a `[level] message` line, with the level colors unless disabled."""
    if not color:
        return f"[{level}] {message}"
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    return f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}"


def stream_for(level: str) -> TextIO:
    return sys.stdout if level in STDOUT_LEVELS else sys.stderr


def log(level: str, message: str) -> None:
    level = str(level).lower()
    print(format_message(level, message, color_enabled()), file=stream_for(level))


class XyzlabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Report a usage error through log() and exit with status 2."""
        log('error', message)
        sys.exit(2)
