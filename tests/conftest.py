"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from ascii_pic.config import RenderConfig

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def make_image(pixels, mode="RGB"):
    """Build an image from a list of rows of pixel tuples."""
    h = len(pixels)
    w = len(pixels[0])
    img = Image.new(mode, (w, h))
    img.putdata([px for row in pixels for px in row])
    return img


@pytest.fixture
def black_white():
    # 2x1: left black, right white
    return make_image([[BLACK, WHITE]])


@pytest.fixture
def gradient():
    """64x32 horizontal grey ramp with a red tint in the top half."""
    arr = np.zeros((32, 64, 3), dtype=np.uint8)
    ramp = np.linspace(0, 255, 64).astype(np.uint8)
    arr[..., 0] = ramp
    arr[..., 1] = ramp
    arr[..., 2] = ramp
    arr[:16, :, 0] = 255
    return Image.fromarray(arr)


@pytest.fixture
def png_file(tmp_path, black_white):
    path = tmp_path / "input.png"
    black_white.save(path)
    return path


@pytest.fixture
def config():
    return RenderConfig(width=2)
