#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/lightness.py

import math

from . import config as c


def toe(L: float) -> float:
    """
    Map OKLab lightness to Okhsl lightness.

    Source: https://bottosson.github.io/posts/colorpicker/#common-code
    Flattens the dark end so equal steps look equally spaced near black.
    """
    k3L_m_k1 = c.TOE_K3 * L - c.TOE_K1
    return 0.5 * (k3L_m_k1 + math.sqrt(k3L_m_k1 * k3L_m_k1 + 4 * c.TOE_K2 * c.TOE_K3 * L))


def luminance_to_oklab_lightness(y_lum: float) -> float:
    """
    Convert a relative luminance to OKLab L, treating it as a D65 gray.

    Source: https://bottosson.github.io/posts/oklab/#converting-from-xyz-to-oklab
    """
    x_factor = c.D65_CHROMA_X / c.D65_CHROMA_Y
    z_factor = (c.UNIT - c.D65_CHROMA_X - c.D65_CHROMA_Y) / c.D65_CHROMA_Y
    xyz = (x_factor * y_lum, y_lum, z_factor * y_lum)

    lms = [sum(m * v for m, v in zip(row, xyz)) for row in c.OKLAB_M1]
    # Negative cone responses have no real cube root here
    lms_ = [max(0.0, v) ** c.OKLAB_CUBE_ROOT_EXP for v in lms]

    return sum(m * v for m, v in zip(c.OKLAB_M2[0], lms_))


def luminance_to_perceptual_lightness(y_lum: float) -> float:
    """Convert a relative luminance (0-1) to Okhsl lightness (0-1)."""
    return toe(luminance_to_oklab_lightness(y_lum))
