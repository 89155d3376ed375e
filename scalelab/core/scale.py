#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/scale.py

import numbers
from typing import Dict, List, NamedTuple, Sequence, Tuple

from . import config as c
from .contrast import inverse_contrast, step_to_contrast
from .conversions import okhsl_to_srgb
from .curves import chroma_for_step, hue_for_step
from .errors import InvalidOptions, LuminanceUnsolvable
from .lightness import luminance_to_perceptual_lightness

ColorScale = Dict[int, Tuple[float, float, float]]


class ScaleOptions(NamedTuple):
    """Options for generating one color scale."""
    base_hue: float                    # Starting hue in degrees (0-360)
    min_chroma: float                  # Saturation at both ends of the scale (0-1)
    max_chroma: float                  # Saturation at step 500 (0-1)
    steps: Sequence[int]               # Integer steps between 0 and 1000
    enable_hue_shift: bool = True      # Apply the Bezold-Brücke correction


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _normalize_steps(steps: Sequence) -> List[int]:
    if isinstance(steps, (str, bytes)) or not isinstance(steps, Sequence):
        raise InvalidOptions("steps must be a sequence of integers between 0 and 1000")

    normalized = []
    for step in steps:
        if not _is_real(step) or step != step or not float(step).is_integer():
            raise InvalidOptions(f"all steps must be integers between 0 and 1000, got {step!r}")
        if not (c.STEP_MIN <= step <= c.STEP_MAX):
            raise InvalidOptions(f"all steps must be integers between 0 and 1000, got {step!r}")
        normalized.append(int(step))
    return normalized


def validate_options(options: ScaleOptions) -> List[int]:
    """
    Check every option before any color is computed.

    Returns the steps as plain ints (integral floats such as 500.0 are
    accepted). Raises InvalidOptions on the first violation.
    """
    if not _is_real(options.base_hue) or not (0.0 <= options.base_hue <= c.HUE_MAX):
        raise InvalidOptions(f"baseHue must be a number between 0 and 360, got {options.base_hue!r}")

    for name, value in (("minChroma", options.min_chroma), ("maxChroma", options.max_chroma)):
        if not _is_real(value) or not (c.CHROMA_MIN <= value <= c.CHROMA_MAX):
            raise InvalidOptions(f"{name} must be a number between 0 and 1, got {value!r}")

    if options.min_chroma > options.max_chroma:
        raise InvalidOptions(
            f"minChroma ({options.min_chroma}) must be less than or equal to maxChroma ({options.max_chroma})"
        )

    return _normalize_steps(options.steps)


def lightness_for_step(step: int) -> float:
    """Okhsl lightness whose luminance has the step's contrast against white."""
    contrast = step_to_contrast(step)
    target_luminance = inverse_contrast(contrast, c.REFERENCE_LUMINANCE)

    if target_luminance is None:
        raise LuminanceUnsolvable(step, contrast)

    return luminance_to_perceptual_lightness(target_luminance)


def generate_color_scale(options: ScaleOptions) -> ColorScale:
    """
    Generate a color scale with predictable contrast between steps.

    Every step is computed from its own inputs only. Returns a mapping
    from step to unrounded sRGB channels (0-255).
    """
    steps = validate_options(options)

    scale: ColorScale = {}
    for step in steps:
        h = hue_for_step(step, options.base_hue, options.enable_hue_shift)
        s = chroma_for_step(step, options.min_chroma, options.max_chroma)
        l_val = lightness_for_step(step)
        scale[step] = okhsl_to_srgb((h, s, l_val))

    return scale
