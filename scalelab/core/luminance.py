#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/luminance.py

from scalelab.shared.clamping import _clamp01
from . import config as c


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an sRGB component given in 0-255."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: float, g: float, b: float) -> float:
    return (
        c.LUMA_R * _srgb_to_linear(r) +
        c.LUMA_G * _srgb_to_linear(g) +
        c.LUMA_B * _srgb_to_linear(b)
    )
