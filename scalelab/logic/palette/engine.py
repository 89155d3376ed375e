#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/engine.py

from typing import Dict, List, Union

from scalelab.core import conversions as conv
from scalelab.core.scale import ScaleOptions, generate_color_scale
from .config import PaletteConfig

PaletteValue = Union[str, List[int]]
Palette = Dict[str, Dict[int, PaletteValue]]


def generate_palette(config: PaletteConfig, fmt: str = "hex", hue_shift: bool = False) -> Palette:
    """
    Generate every color family of a config.

    Channels are rounded, then formatted as '#rrggbb' (hex) or [r, g, b]
    (srgb). Steps are listed in ascending order.
    """
    palette: Palette = {}

    for name, definition in config.colors.items():
        scale = generate_color_scale(ScaleOptions(
            base_hue=definition.hue,
            min_chroma=definition.min_chroma,
            max_chroma=definition.max_chroma,
            steps=config.steps,
            enable_hue_shift=hue_shift,
        ))

        formatted: Dict[int, PaletteValue] = {}
        for step in sorted(scale):
            rgb = conv.round_rgb(scale[step])
            formatted[step] = conv.srgb_to_hex(rgb) if fmt == "hex" else list(rgb)
        palette[name] = formatted

    return palette
