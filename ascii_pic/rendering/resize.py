#!/usr/bin/env python3
# ascii_pic/rendering/resize.py
"""
Downsample a source image to the character grid.

Glyph cells are roughly twice as tall as they are wide, so the grid height
is halved to keep the art from stretching vertically.
"""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from ascii_pic.errors import GeometryError

__all__ = ["CELL_ASPECT", "grid_height", "resize_to_grid"]

log = logging.getLogger(__name__)

CELL_ASPECT = 0.5


def grid_height(width: int, src_width: int, src_height: int) -> int:
    """round(width * src_height / src_width * 0.5), halves rounded up."""
    if src_width <= 0 or src_height <= 0:
        raise GeometryError(f"degenerate source image {src_width}x{src_height}")
    return int(width * (src_height / src_width) * CELL_ASPECT + 0.5)


def resize_to_grid(img: Image.Image, width: int) -> np.ndarray:
    """
    Resample img to width x grid_height() with Lanczos.
    Returns an (H, W, 3) uint8 array. H may be 0 for very wide images.
    """
    if width < 1:
        raise GeometryError(f"target width must be positive, got {width}")
    height = grid_height(width, img.width, img.height)
    if height == 0:
        log.debug("Grid height rounds to 0 for %dx%d source", img.width, img.height)
        return np.zeros((0, width, 3), dtype=np.uint8)

    if img.mode != "RGB":
        img = img.convert("RGB")
    if img.width != width or img.height != height:
        img = img.resize((width, height), Image.LANCZOS)
    log.debug("Resampled to %dx%d grid", width, height)
    return np.asarray(img, dtype=np.uint8)
