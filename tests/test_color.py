"""Tests for luminance and colour boosting."""

import numpy as np
import pytest

from ascii_pic.rendering.color import (
    luminance,
    luminance_array,
    scale_channel,
    scale_rgb,
    transform_color,
)


def test_luminance_extremes():
    assert luminance(0, 0, 0) == 0
    assert luminance(255, 255, 255) == 255


def test_luminance_weights_green_heaviest():
    assert luminance(0, 255, 0) > luminance(255, 0, 0) > luminance(0, 0, 255)
    assert luminance(255, 0, 0) == 76
    assert luminance(0, 255, 0) == 149
    assert luminance(0, 0, 255) == 29


def test_luminance_array_matches_scalar():
    rng = np.random.default_rng(0)
    arr = rng.integers(0, 256, size=(7, 9, 3), dtype=np.uint8)
    lum = luminance_array(arr)
    assert lum.shape == (7, 9)
    for y in range(7):
        for x in range(9):
            r, g, b = arr[y, x].tolist()
            assert lum[y, x] == luminance(r, g, b)


def test_luminance_array_ignores_alpha():
    arr = np.array([[[255, 255, 255, 0]]], dtype=np.uint8)
    assert luminance_array(arr)[0, 0] == 255


@pytest.mark.parametrize("boost", [50, 80, 100, 110, 150, 200])
def test_boost_clamp(boost):
    for c in range(256):
        assert scale_channel(c, boost) == min(255, max(0, c * boost // 100))


def test_scale_rgb_saturates():
    assert scale_rgb((200, 100, 50), 200) == (255, 200, 100)


def test_transform_color_with_tint():
    fg, bg = transform_color((200, 100, 50), 110, 30)
    assert fg == (220, 110, 55)
    assert bg == (60, 30, 15)


def test_transform_color_identity_without_tint():
    fg, bg = transform_color((12, 34, 56))
    assert fg == (12, 34, 56)
    assert bg is None
