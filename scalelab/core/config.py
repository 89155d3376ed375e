#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_MID_LUMINANCE = 0.18          # Relative luminance separating light from dark references

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
LUMINANCE_MIN = 0.0                # Black
LUMINANCE_MAX = 1.0                # White
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# D65 White Point Chromaticity (Source: CIE 15:2004)
D65_CHROMA_X = 0.3127              # x chromaticity coordinate of D65
D65_CHROMA_Y = 0.3290              # y chromaticity coordinate of D65

# XYZ to LMS matrix M1 (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_M1 = (
    (0.8189330101, 0.3618667424, -0.1288597137),   # Long-wavelength (L) cone response
    (0.0329845436, 0.9293118715, 0.0361456387),    # Medium-wavelength (M) cone response
    (0.0482003018, 0.2643662691, 0.6338517070),    # Short-wavelength (S) cone response
)

# LMS' to OKLab matrix M2 (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_M2 = (
    (0.2104542553, 0.7936177850, -0.0040720468),   # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),   # Green-red (a)
    (0.0259040371, 0.7827717662, -0.8086757660),   # Blue-yellow (b)
)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# Okhsl toe function (Source: https://bottosson.github.io/posts/colorpicker/#common-code)
TOE_K1 = 0.206                     # Offset shaping the dark end of the toe
TOE_K2 = 0.03                      # Curvature of the toe near black
TOE_K3 = (1.0 + TOE_K1) / (1.0 + TOE_K2)  # Keeps toe(1) == 1

# ==========================================
# Accessible Scale Constants
# ==========================================

# Source: https://mattstromawn.com/writing/generating-color-palettes/
STEP_MIN = 0                       # Reference anchor (pure white)
STEP_MAX = 1000                    # Darkest end of a scale
STEP_MID = 500                     # Chroma peak; steps this far apart reach WCAG AA
CONTRAST_EXPONENT = 3.04           # r(x) = e^(3.04x) keeps 500-step pairs >= 4.5:1
REFERENCE_LUMINANCE = 1.0          # Every scale is computed against white

HUE_SHIFT_MAX = 5.0                # Bezold-Brücke correction at step 0, in degrees
CHROMA_MIN = 0.0                   # Lower bound for saturation inputs
CHROMA_MAX = 1.0                   # Upper bound for saturation inputs

# Report Defaults
VERIFY_MARGIN = 0.5                # Allowed absolute error against the contrast law
VERIFY_STEPS = [0, 100, 200, 300, 400, 500, 600, 700, 800, 900, 1000]
JSON_INDENT = 2                    # Pretty-printed palette output

# ==========================================
# Default Palette
# ==========================================

DEFAULT_STEPS = [0, 20, 40, 100, 180, 280, 398, 520, 590, 700, 820, 930, 960, 990, 1000]

# name: (hue, min chroma, max chroma)
DEFAULT_COLORS = {
    "gray": (0, 0.0, 0.0),
    "blue": (256, 0.4, 0.967),
    "green": (144, 0.4, 0.967),
    "red": (24, 0.4, 0.967),
    "yellow": (67, 0.4, 0.967),
    "purple": (290, 0.4, 0.967),
    "teal": (205, 0.4, 0.967),
    "orange": (38, 0.4, 0.967),
}

OUTPUT_FORMATS = ["hex", "srgb"]

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"

PASS_MARK = "✓"
FAIL_MARK = "✗"
