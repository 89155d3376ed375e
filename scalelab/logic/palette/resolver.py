#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/resolver.py

import argparse
import sys

from scalelab.core.errors import ScaleError
from scalelab.shared.logger import log
from .config import PaletteConfig, PaletteConfigError, default_palette_config, load_palette_config
from .engine import generate_palette
from .renderer import render_palette, write_palette


def resolve_palette_config(path: str) -> PaletteConfig:
    """Load the config at path, or the default one; exits 1 on a bad file."""
    if not path:
        return default_palette_config()
    try:
        return load_palette_config(path)
    except PaletteConfigError as e:
        log("error", str(e))
        sys.exit(1)


def resolve_palette_input(args: argparse.Namespace) -> None:
    """Orchestrate config loading, palette generation and output."""
    config = resolve_palette_config(args.config)

    try:
        palette = generate_palette(config, args.format, hue_shift=args.hue_shift)
    except ScaleError as e:
        log("error", str(e))
        sys.exit(1)

    if not args.output:
        print(render_palette(palette))
        return

    try:
        write_palette(palette, args.output)
    except OSError as e:
        log("error", f"error writing output file: {e}")
        sys.exit(1)
    log("success", f"palette saved to {args.output}")
