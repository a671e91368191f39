#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/shared/sanitizer.py

import argparse
import re

from xyzlab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))

    if not digits_only:
        return None

    val = int(digits_only)
    if is_negative:
        val = -val
    return val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Extracts only alphabetical characters from a string, lowercasing them."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., format names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "from_format": handle_string_clean,
    "to_format": handle_string_clean,
    "colorspace": handle_string_clean,
    "steps": handle_int_range(c.MIN_STEPS, c.MAX_STEPS),
    "channel": handle_int_range(c.RGB_CHANNEL_MIN, c.RGB_CHANNEL_MAX),
    "luminance": handle_float_range(0.0, 1.0),
}
