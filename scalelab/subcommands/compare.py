#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/compare.py

import argparse
import sys
from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.logic.compare.resolver import resolve_compare_input

def get_compare_parser() -> argparse.ArgumentParser:
    """Create argument parser for compare command."""
    parser = ScalelabArgumentParser(
        prog="scalelab compare",
        description="scalelab compare: check a generated palette against expected hex colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-e",
        "--expected",
        required=True,
        help="JSON file of expected colors: {family: {step: hex}}"
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="palette config to generate from (default: built-in palette)"
    )

    return parser

def main() -> None:
    """Main entry point for compare command."""
    parser = get_compare_parser()
    args = parser.parse_args(sys.argv[1:])
    sys.exit(0 if resolve_compare_input(args) else 1)

if __name__ == "__main__":
    main()
