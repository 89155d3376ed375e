#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/verify.py

import argparse
import sys
from scalelab.core import config as c
from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.logic.verify.resolver import resolve_verify_input

def get_verify_parser() -> argparse.ArgumentParser:
    """Create argument parser for verify command."""
    parser = ScalelabArgumentParser(
        prog="scalelab verify",
        description="scalelab verify: audit the contrast between every pair of steps in a scale",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--hue",
        type=INPUT_HANDLERS["hue"],
        default=0.0,
        help="base hue in degrees, 0 to 360 (default: 0, gray)"
    )
    parser.add_argument(
        "--min-chroma",
        type=INPUT_HANDLERS["chroma"],
        default=0.0,
        help="saturation at both ends of the scale, 0 to 1 (default: 0)"
    )
    parser.add_argument(
        "--max-chroma",
        type=INPUT_HANDLERS["chroma"],
        default=0.0,
        help="saturation at step 500, 0 to 1 (default: 0)"
    )
    parser.add_argument(
        "-S",
        "--steps",
        nargs="+",
        type=INPUT_HANDLERS["step"],
        default=list(c.VERIFY_STEPS),
        help="steps to audit (default: 0 100 ... 1000)"
    )
    parser.add_argument(
        "-m",
        "--margin",
        type=INPUT_HANDLERS["margin"],
        default=c.VERIFY_MARGIN,
        help=f"allowed difference from the expected contrast (default: {c.VERIFY_MARGIN})"
    )
    parser.add_argument(
        "--hue-shift",
        action="store_true",
        help="apply the Bezold-Brücke hue shift"
    )

    return parser

def main() -> None:
    """Main entry point for verify command."""
    parser = get_verify_parser()
    args = parser.parse_args(sys.argv[1:])
    sys.exit(0 if resolve_verify_input(args) else 1)

if __name__ == "__main__":
    main()
