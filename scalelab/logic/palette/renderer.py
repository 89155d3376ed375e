#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/renderer.py

import json

from scalelab.core import config as c
from .engine import Palette


def render_palette(palette: Palette) -> str:
    """Serialize a palette as pretty-printed JSON."""
    return json.dumps(palette, indent=c.JSON_INDENT)


def write_palette(palette: Palette, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_palette(palette))
        f.write("\n")
