#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/conversions.py

from typing import Tuple

from coloraide import Color as _Base
from coloraide.spaces.okhsl import Okhsl

from . import config as c
from scalelab.shared.clamping import _clamp255
from scalelab.shared.sanitizer import normalize_hex


class Color(_Base):
    """Project-local Color class with Okhsl support."""


Color.register(Okhsl(), overwrite=True)


def okhsl_to_srgb(hsl: Tuple[float, float, float]) -> Tuple[float, float, float]:
    """
    Convert an Okhsl (hue 0-360, saturation 0-1, lightness 0-1) color to
    sRGB channels in the 0-255 range, unrounded.
    """
    srgb = Color("okhsl", list(hsl)).convert("srgb")
    r, g, b = srgb.coords()
    return r * c.RGB_MAX, g * c.RGB_MAX, b * c.RGB_MAX


def round_rgb(rgb: Tuple[float, float, float]) -> Tuple[int, int, int]:
    """Round and clamp 0-255 channels to integers."""
    return tuple(int(round(_clamp255(v))) for v in rgb)


def srgb_to_hex(rgb: Tuple[float, float, float]) -> str:
    """Format a 0-255 sRGB triple as a lowercase #rrggbb string."""
    r, g, b = round_rgb(rgb)
    return Color("srgb", [r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX]).to_string(hex=True)


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert a hex string (#rgb or #rrggbb, any case) to an RGB tuple."""
    h = normalize_hex(hex_code)
    if not h:
        raise ValueError(f"invalid hex value: '{hex_code}'")
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))
