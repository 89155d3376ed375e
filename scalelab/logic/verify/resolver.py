#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/verify/resolver.py

import argparse
import sys

from scalelab.core import conversions as conv
from scalelab.core.errors import ScaleError
from scalelab.core.scale import ScaleOptions, generate_color_scale
from scalelab.shared.logger import log
from .engine import audit_scale
from .renderer import render_aa_checks, render_contrast_checks


def resolve_verify_input(args: argparse.Namespace) -> bool:
    """Generate the requested scale, print the audit and return overall success."""
    options = ScaleOptions(
        base_hue=args.hue,
        min_chroma=args.min_chroma,
        max_chroma=args.max_chroma,
        steps=args.steps,
        enable_hue_shift=args.hue_shift,
    )
    try:
        scale = generate_color_scale(options)
    except ScaleError as e:
        log("error", str(e))
        sys.exit(1)

    law_checks, aa_checks = audit_scale(scale, args.margin)
    colors = {step: conv.round_rgb(rgb) for step, rgb in scale.items()}

    render_contrast_checks(law_checks, colors, args.margin)
    render_aa_checks(aa_checks)

    aa_passed = all(check.passed for check in aa_checks)
    all_passed = aa_passed and all(check.passed for check in law_checks)

    print()
    if aa_passed:
        log("success", "all WCAG AA compliance checks passed")
    else:
        log("error", "some WCAG AA compliance checks failed")
    if all_passed:
        log("success", "all checks passed")
    else:
        log("error", "some checks failed")

    return all_passed
