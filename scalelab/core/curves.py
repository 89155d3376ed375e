#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/curves.py

from . import config as c
from .errors import InvalidOptions


def _normalize_step(step: float) -> float:
    t = step / c.STEP_MAX
    if not (0.0 <= t <= c.UNIT):
        raise InvalidOptions("step must produce a normalized value between 0 and 1")
    return t


def hue_for_step(step: float, base_hue: float, enable_shift: bool = True) -> float:
    """
    Compensate for the Bezold-Brücke effect, where colors look more purple
    in shadows and more yellow in highlights, by shifting the hue up to 5
    degrees at the light end of the scale.

    Source: https://mattstromawn.com/writing/generating-color-palettes/
    """
    t = _normalize_step(step)

    if not (0.0 <= base_hue <= c.HUE_MAX):
        raise InvalidOptions("baseHue must be a number between 0 and 360")

    if base_hue == 0 or not enable_shift:
        return base_hue

    hue = base_hue + c.HUE_SHIFT_MAX * (c.UNIT - t)
    return hue % c.HUE_MAX if hue > c.HUE_MAX else hue


def chroma_for_step(step: float, min_chroma: float, max_chroma: float) -> float:
    """
    Parabolic chroma curve: most vivid at step 500, falling back to
    min_chroma at both ends of the scale.
    """
    t = _normalize_step(step)

    if not (c.CHROMA_MIN <= min_chroma <= c.CHROMA_MAX and c.CHROMA_MIN <= max_chroma <= c.CHROMA_MAX):
        raise InvalidOptions("chroma values must be numbers between 0 and 1")
    if min_chroma > max_chroma:
        raise InvalidOptions("minChroma must be less than or equal to maxChroma")

    delta = max_chroma - min_chroma
    return -4 * delta * t ** 2 + 4 * delta * t + min_chroma
