#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/sanitizer.py

import argparse
import re

from scalelab.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a hex color into a standard 6-character uppercase string.
    Accepts an optional '#' and the 3-digit shorthand ('ABC' -> 'AABBCC').
    Returns an empty string for anything else.
    """
    if value is None:
        return ""
    s = str(value).strip().lstrip("#").upper()

    if not re.fullmatch(r"[0-9A-F]{3}|[0-9A-F]{6}", s):
        return ""

    if len(s) == 3:
        return "".join([ch * 2 for ch in s])
    return s


def _extract_signed_float(value: str) -> float:
    """
    Parses a floating-point number from a string, tolerating surrounding
    whitespace. Returns None when the value is not a finite number.
    """
    if value is None:
        return None
    try:
        val = float(str(value).strip())
    except ValueError:
        return None
    if val != val or val in (float("inf"), float("-inf")):
        return None
    return val


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_format(v: str) -> str:
    """Validator for the palette output format."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.OUTPUT_FORMATS:
        raw = _sanitize_for_log(v)
        choices = " or ".join(f"'{f}'" for f in c.OUTPUT_FORMATS)
        raise argparse.ArgumentTypeError(f"--format must be either {choices}, got '{raw}'")
    return cleaned


def handle_step(v: str) -> int:
    """Validator for a single scale step: an integer in [0, 1000]."""
    raw = _sanitize_for_log(v)
    val = _extract_signed_float(v)
    if val is None or not val.is_integer():
        raise argparse.ArgumentTypeError(f"invalid step: '{raw}' (steps are integers)")
    val = int(val)
    if not (c.STEP_MIN <= val <= c.STEP_MAX):
        raise argparse.ArgumentTypeError(f"step out of range: '{raw}' (0 to {c.STEP_MAX})")
    return val


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that rejects floats outside
    the [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if not (min_v <= val <= max_v):
            raise argparse.ArgumentTypeError(f"value {val:g} must be between {min_v:g} and {max_v:g}")
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "format": handle_format,
    "step": handle_step,
    "hue": handle_float_range(0.0, c.HUE_MAX),
    "chroma": handle_float_range(c.CHROMA_MIN, c.CHROMA_MAX),
    "margin": handle_float_range(0.0, c.WCAG_MAX_RATIO),
}
