#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/compare/resolver.py

import argparse
import sys

from scalelab.core.errors import ScaleError
from scalelab.shared.logger import log
from scalelab.logic.palette.config import PaletteConfigError
from scalelab.logic.palette.engine import generate_palette
from scalelab.logic.palette.resolver import resolve_palette_config
from .engine import compare_palettes, load_expected_palette
from .renderer import render_comparison


def resolve_compare_input(args: argparse.Namespace) -> bool:
    """Compare the generated palette with the expected file; True when all match."""
    try:
        expected = load_expected_palette(args.expected)
    except PaletteConfigError as e:
        log("error", str(e))
        sys.exit(1)

    config = resolve_palette_config(args.config)
    try:
        generated = generate_palette(config, "hex", hue_shift=False)
    except ScaleError as e:
        log("error", str(e))
        sys.exit(1)

    results = compare_palettes(expected, generated)
    render_comparison(results)

    mismatches = sum(1 for result in results if not result.match)
    print()
    if mismatches:
        log("error", f"{mismatches} of {len(results)} colors differ")
        return False
    log("success", f"all {len(results)} colors match")
    return True
