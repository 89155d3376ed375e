#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/errors.py


class ScaleError(ValueError):
    """Base class for color scale domain errors."""


class InvalidOptions(ScaleError):
    """Scale options are out of range; raised before any step is computed."""


class LuminanceUnsolvable(ScaleError):
    """
    The contrast inversion for a step had no valid solution.

    Carries the offending step and the contrast that was computed for it.
    """

    def __init__(self, step: int, contrast: float):
        self.step = step
        self.contrast = contrast
        super().__init__(
            f"problem calculating the target luminance for step {step} (contrast {contrast:.4f})"
        )
