#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/palette/config.py

import json
from typing import Dict, List, NamedTuple

from scalelab.core import config as c


class PaletteConfigError(ValueError):
    """A palette config file could not be read or has the wrong shape."""


class ColorDefinition(NamedTuple):
    hue: float
    min_chroma: float
    max_chroma: float


class PaletteConfig(NamedTuple):
    steps: List[int]
    colors: Dict[str, ColorDefinition]


def default_palette_config() -> PaletteConfig:
    """The 8 built-in color families across the 15 default steps."""
    return PaletteConfig(
        steps=list(c.DEFAULT_STEPS),
        colors={name: ColorDefinition(*values) for name, values in c.DEFAULT_COLORS.items()},
    )


def _number(value, where: str):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PaletteConfigError(f"{where} must be a number, got {value!r}")
    return value


def parse_palette_config(data) -> PaletteConfig:
    """
    Build a PaletteConfig from decoded JSON:

        {"steps": [0, 100, ...],
         "colors": {"red": {"hue": 0, "minChroma": 0, "maxChroma": 1}}}

    Only the shape is checked here; value ranges are checked when the
    scales are generated.
    """
    if not isinstance(data, dict):
        raise PaletteConfigError("config must be a JSON object with 'steps' and 'colors'")

    steps = data.get("steps")
    if not isinstance(steps, list) or not steps:
        raise PaletteConfigError("config 'steps' must be a non-empty list of numbers")
    steps = [_number(step, "each step") for step in steps]

    colors = data.get("colors")
    if not isinstance(colors, dict) or not colors:
        raise PaletteConfigError("config 'colors' must be a non-empty object")

    definitions = {}
    for name, entry in colors.items():
        if not isinstance(entry, dict):
            raise PaletteConfigError(f"color '{name}' must be an object with hue, minChroma and maxChroma")
        try:
            definitions[name] = ColorDefinition(
                hue=_number(entry["hue"], f"'{name}.hue'"),
                min_chroma=_number(entry["minChroma"], f"'{name}.minChroma'"),
                max_chroma=_number(entry["maxChroma"], f"'{name}.maxChroma'"),
            )
        except KeyError as e:
            raise PaletteConfigError(f"color '{name}' is missing {e.args[0]!r}") from e

    return PaletteConfig(steps=steps, colors=definitions)


def load_palette_config(path: str) -> PaletteConfig:
    """Read and parse a JSON palette config file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise PaletteConfigError(f"error reading config file: {e}") from e
    except json.JSONDecodeError as e:
        raise PaletteConfigError(f"error parsing config file '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise PaletteConfigError(f"error reading config file '{path}': not valid UTF-8 ({e})") from e

    return parse_palette_config(data)
