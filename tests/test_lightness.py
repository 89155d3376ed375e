import pytest

from scalelab.core.lightness import (
    luminance_to_oklab_lightness,
    luminance_to_perceptual_lightness,
    toe,
)


def test_toe_fixed_points():
    assert toe(0.0) == pytest.approx(0.0)
    assert toe(1.0) == pytest.approx(1.0, abs=1e-4)


def test_toe_flattens_midtones():
    assert toe(0.5) == pytest.approx(0.42114, abs=1e-4)


def test_oklab_lightness_of_gray_is_cube_root():
    for y in (0.01, 0.18, 0.5, 1.0):
        assert luminance_to_oklab_lightness(y) == pytest.approx(y ** (1.0 / 3.0), abs=1e-3)


def test_perceptual_lightness_extremes():
    assert luminance_to_perceptual_lightness(0.0) == pytest.approx(0.0)
    assert luminance_to_perceptual_lightness(1.0) == pytest.approx(1.0, abs=1e-3)


def test_perceptual_lightness_is_increasing():
    values = [luminance_to_perceptual_lightness(i / 100) for i in range(101)]
    assert all(a < b for a, b in zip(values, values[1:]))
