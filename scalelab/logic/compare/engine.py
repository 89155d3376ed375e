#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/compare/engine.py

import json
from typing import Dict, List, NamedTuple, Optional

from scalelab.shared.sanitizer import normalize_hex
from scalelab.logic.palette.config import PaletteConfigError
from scalelab.logic.palette.engine import Palette

ExpectedPalette = Dict[str, Dict[int, str]]


class StepComparison(NamedTuple):
    family: str
    step: int
    expected: str
    generated: Optional[str]
    match: bool


def load_expected_palette(path: str) -> ExpectedPalette:
    """Read a {family: {step: hex}} JSON file of reference colors."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise PaletteConfigError(f"error reading expected palette: {e}") from e
    except json.JSONDecodeError as e:
        raise PaletteConfigError(f"error parsing expected palette '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise PaletteConfigError(f"error reading expected palette '{path}': not valid UTF-8 ({e})") from e

    if not isinstance(data, dict):
        raise PaletteConfigError("expected palette must be a JSON object of color families")

    expected: ExpectedPalette = {}
    for family, steps in data.items():
        if not isinstance(steps, dict):
            raise PaletteConfigError(f"expected family '{family}' must map steps to hex strings")
        try:
            expected[family] = {int(step): str(hex_code) for step, hex_code in steps.items()}
        except ValueError as e:
            raise PaletteConfigError(f"expected family '{family}' has a non-integer step") from e
    return expected


def compare_palettes(expected: ExpectedPalette, generated: Palette) -> List[StepComparison]:
    """
    Compare expected hex colors with a generated hex palette.

    Hex codes are compared case-insensitively with 3-digit shorthand
    expanded. A family or step missing from the generated palette never
    matches.
    """
    results: List[StepComparison] = []
    for family, steps in expected.items():
        family_colors = generated.get(family, {})
        for step, expected_hex in steps.items():
            generated_hex = family_colors.get(step)
            wanted = normalize_hex(expected_hex)
            match = generated_hex is not None and bool(wanted) and wanted == normalize_hex(generated_hex)
            results.append(StepComparison(family, step, expected_hex, generated_hex, match))
    return results
