#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/compare/renderer.py

from typing import List

from scalelab.core import config as c
from scalelab.shared.preview import mark
from .engine import StepComparison


def render_comparison(results: List[StepComparison]) -> None:
    """Print a per-family comparison report."""
    print(f"{c.BOLD_WHITE}color comparison report{c.RESET}")

    family = None
    for result in results:
        if result.family != family:
            family = result.family
            print(f"\n{c.MSG_BOLD_COLORS['info']}{family.upper()}:{c.RESET}")
            print("=" * 60)
        generated = result.generated if result.generated is not None else "missing"
        print(f"step {result.step:>4}: {mark(result.match)} expected: {result.expected}, generated: {generated}")
