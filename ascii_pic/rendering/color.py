#!/usr/bin/env python3
# ascii_pic/rendering/color.py
"""
Colour maths shared by every renderer.

- luminance(): Rec. 601 luma in integer arithmetic, exact at 0 and 255.
- scale_channel(): percentage scaling of one channel, clamped to 0..255.
- transform_color(): boosted foreground plus optional dim background tint.

The terminal path uses the source colour untouched (boost 100, no tint);
the raster path boosts the glyph and tints the cell background.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

RGB = Tuple[int, int, int]

__all__ = [
    "RGB",
    "LUMA_WEIGHTS",
    "BACKGROUND_TINT_PERCENT",
    "luminance",
    "luminance_array",
    "scale_channel",
    "scale_rgb",
    "transform_color",
]

# Per-mille weights for red, green, blue (0.299 / 0.587 / 0.114)
LUMA_WEIGHTS = (299, 587, 114)

BACKGROUND_TINT_PERCENT = 30


def luminance(r: int, g: int, b: int) -> int:
    """Perceptual brightness 0..255 of one pixel. Alpha is not considered."""
    wr, wg, wb = LUMA_WEIGHTS
    return (wr * int(r) + wg * int(g) + wb * int(b)) // 1000


def luminance_array(arr: np.ndarray) -> np.ndarray:
    """
    Vectorised luminance() over an (H, W, 3+) uint8 grid.
    Returns an (H, W) int32 array with the same values luminance() gives per pixel.
    """
    rgb = arr[..., :3].astype(np.int32)
    wr, wg, wb = LUMA_WEIGHTS
    return (wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]) // 1000


def scale_channel(value: int, percent: int) -> int:
    return max(0, min(255, int(value) * int(percent) // 100))


def scale_rgb(rgb: RGB, percent: int) -> RGB:
    r, g, b = rgb
    return scale_channel(r, percent), scale_channel(g, percent), scale_channel(b, percent)


def transform_color(
    rgb: RGB,
    boost_percent: int = 100,
    tint_percent: Optional[int] = None,
) -> Tuple[RGB, Optional[RGB]]:
    """
    Return (foreground, background) for one cell.

    foreground is the source colour scaled by boost_percent.
    background is the source colour scaled by tint_percent, or None when no tint is wanted.
    """
    fg = scale_rgb(rgb, boost_percent)
    bg = scale_rgb(rgb, tint_percent) if tint_percent is not None else None
    return fg, bg
