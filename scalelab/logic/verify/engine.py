#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/verify/engine.py

from typing import List, NamedTuple, Tuple

from scalelab.core import config as c
from scalelab.core.contrast import get_contrast_ratio_rgb, step_to_contrast
from scalelab.core.scale import ColorScale


class ContrastCheck(NamedTuple):
    reference: int
    step: int
    expected: float
    actual: float
    passed: bool


class AACheck(NamedTuple):
    low: int
    high: int
    contrast: float
    passed: bool


def audit_scale(scale: ColorScale, margin: float = c.VERIFY_MARGIN) -> Tuple[List[ContrastCheck], List[AACheck]]:
    """
    Measure the WCAG contrast of every pair of colors in a scale, using
    the unrounded channels.

    Each pair is checked against the contrast law e^(3.04 * delta / 1000)
    within margin, and pairs at least 500 steps apart against WCAG AA.
    """
    steps = sorted(scale)
    law_checks: List[ContrastCheck] = []
    aa_checks: List[AACheck] = []

    for i, low in enumerate(steps):
        for high in steps[i + 1:]:
            actual = get_contrast_ratio_rgb(scale[low], scale[high])
            expected = step_to_contrast(high - low)
            law_checks.append(ContrastCheck(low, high, expected, actual, abs(actual - expected) <= margin))

            if high - low >= c.STEP_MID:
                aa_checks.append(AACheck(low, high, actual, actual >= c.WCAG_AA_NORMAL))

    return law_checks, aa_checks
