#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/main.py

import argparse
import sys

from scalelab import __version__
from scalelab.logic.palette.resolver import resolve_palette_input
from scalelab.subcommands.command_registry import SUBCOMMANDS
from scalelab.shared.logger import log, ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS

CONFIG_HELP = """\
config file format:
  {
    "steps": [0, 100, 200, 300, 400, 500, 600, 700, 800, 900, 1000],
    "colors": {
      "red": { "hue": 0, "minChroma": 0, "maxChroma": 1 },
      "blue": { "hue": 210, "minChroma": 0, "maxChroma": 1 },
      "gray": { "hue": 0, "minChroma": 0, "maxChroma": 0 }
    }
  }

the default config is used if no config file is provided.
subcommands: verify, compare (see 'scalelab --help-full')"""


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main palette command."""
    parser = ScalelabArgumentParser(
        prog="scalelab",
        description="scalelab: generate accessible color scales with predictable WCAG contrast",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=CONFIG_HELP,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"scalelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="path to JSON config file (optional)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="save output to JSON file instead of printing",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=INPUT_HANDLERS["format"],
        default="hex",
        help='output format: "hex" or "srgb" (default: "hex")',
    )
    parser.add_argument(
        "--hue-shift",
        action="store_true",
        help="apply the Bezold-Brücke hue shift to every scale",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_palette_command(args: argparse.Namespace) -> None:
    """Entry point for the palette command."""
    parser = get_palette_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    # A subcommand name passed in the wrong place
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(1)

    resolve_palette_input(args)


def main() -> None:
    """Main entry point for scalelab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_palette_parser()
    args = parser.parse_args()
    handle_palette_command(args)


if __name__ == "__main__":
    main()
