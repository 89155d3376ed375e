#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/preview.py

from typing import Tuple

from scalelab.core import config as c


def color_swatch(rgb: Tuple[int, int, int], width: int = 6) -> str:
    r, g, b = rgb
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}"


def mark(passed: bool) -> str:
    if passed:
        return f"{c.MSG_BOLD_COLORS['success']}{c.PASS_MARK}{c.RESET}"
    return f"{c.MSG_BOLD_COLORS['error']}{c.FAIL_MARK}{c.RESET}"
