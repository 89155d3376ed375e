#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/contrast.py

import math
from typing import Optional, Tuple

from . import config as c
from .luminance import get_luminance


def step_to_contrast(step: float) -> float:
    """
    Convert a scale step (0-1000) into its target WCAG contrast ratio
    against step 0.

    Source: https://mattstromawn.com/writing/generating-color-palettes/
    Formula: r(x) = e^(3.04x), x = step / 1000. Steps that differ by 500
    or more reach the WCAG AA ratio of 4.5:1.
    """
    return math.exp(c.CONTRAST_EXPONENT * (step / c.STEP_MAX))


def inverse_contrast(contrast: float, reference_luminance: float = c.REFERENCE_LUMINANCE) -> Optional[float]:
    """
    Find the luminance that has the given WCAG contrast against a known
    reference luminance.

    A light reference (Y > 0.18) solves for a darker color, a dark one for
    a lighter color. The result is clamped to [0, 1]. Returns None when the
    contrast is outside [1, 21] or the reference outside [0, 1].
    """
    if not (c.LUMINANCE_MIN <= reference_luminance <= c.LUMINANCE_MAX):
        return None

    if not (c.WCAG_MIN_RATIO <= contrast <= c.WCAG_MAX_RATIO):
        return None

    offset = c.WCAG_LUMINANCE_OFFSET
    if reference_luminance > c.WCAG_MID_LUMINANCE:
        output = (reference_luminance + offset) / contrast - offset
    else:
        output = contrast * (reference_luminance + offset) - offset

    return max(c.LUMINANCE_MIN, min(c.LUMINANCE_MAX, output))


def get_contrast_ratio_rgb(c1: Tuple[float, float, float], c2: Tuple[float, float, float]) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*c1)
    y2 = get_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)
