#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/verify/renderer.py

from typing import Dict, List, Tuple

from scalelab.core import config as c
from scalelab.shared.preview import color_swatch, mark
from .engine import AACheck, ContrastCheck

RULE = "=" * 60


def _rgb_text(rgb: Tuple[int, int, int]) -> str:
    return ", ".join(f"{v:>3}" for v in rgb)


def render_contrast_checks(checks: List[ContrastCheck], colors: Dict[int, Tuple[int, int, int]], margin: float) -> None:
    """Print the contrast-law table grouped by reference step."""
    current = None
    for check in checks:
        if check.reference != current:
            if current is not None:
                print(f"\n{RULE}")
            current = check.reference
            print(f"{c.MSG_BOLD_COLORS['info']}contrast from step {current}{c.RESET}\n")

        print(
            f"step {check.step:>4}: {color_swatch(colors[check.step])} {_rgb_text(colors[check.step])}"
            f" vs {color_swatch(colors[check.reference])} {_rgb_text(colors[check.reference])}"
        )
        print(
            f"  expected: {check.expected:.2f}, got: {check.actual:.2f}, "
            f"difference: {abs(check.actual - check.expected):.2f} (margin: ±{margin}) {mark(check.passed)}"
        )


def render_aa_checks(checks: List[AACheck]) -> None:
    print(f"\n{RULE}")
    print(f"{c.MSG_BOLD_COLORS['info']}WCAG AA compliance ({c.STEP_MID}+ steps apart must reach {c.WCAG_AA_NORMAL}:1){c.RESET}\n")
    for check in checks:
        print(
            f"step {check.low:>4} to {check.high:>4} (diff: {check.high - check.low:>4}): "
            f"contrast = {check.contrast:.2f} {mark(check.passed)}"
        )
