#!/usr/bin/env python3
# ascii_pic/rendering/raster_mode.py
"""
Raster (PNG) renderer.

Lays the grid out on an RGBA canvas, one font-sized cell per character:
    cell width  = font size
    cell height = font size * 1.8
    40 px padding on every side, near-black fill.

Colour mode paints each cell with a 30% tint of its source colour and draws the
glyph in the boosted colour. Monochrome draws the glyph in boosted grey.

With workers > 1 the rows are split into contiguous bands. Each band is drawn
by one worker onto its own image with its own font and draw context, then
pasted into its own region of the canvas. Bands never overlap.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ascii_pic.config import RenderConfig
from ascii_pic.errors import ImageIOError
from ascii_pic.rendering.color import (
    BACKGROUND_TINT_PERCENT,
    RGB,
    scale_channel,
    transform_color,
)
from ascii_pic.rendering.fonts import font_ascent, load_font
from ascii_pic.rendering.renderer import CellGrid, CharacterCell, RenderBackend

__all__ = [
    "PADDING",
    "BACKGROUND",
    "cell_size",
    "canvas_size",
    "cell_paint",
    "split_rows",
    "RasterRenderer",
]

log = logging.getLogger(__name__)

PADDING = 40
BACKGROUND = (5, 5, 5, 255)


def cell_size(font_size: int) -> Tuple[int, int]:
    # font_size * 1.8 without float drift
    return font_size, font_size * 18 // 10


def canvas_size(grid_w: int, grid_h: int, font_size: int) -> Tuple[int, int]:
    cw, ch = cell_size(font_size)
    return grid_w * cw + 2 * PADDING, grid_h * ch + 2 * PADDING


def cell_paint(cell: CharacterCell, config: RenderConfig) -> Tuple[RGB, Optional[RGB]]:
    """Return (glyph colour, background tint or None) for one cell."""
    if config.color:
        return transform_color(cell.color, config.brightness_boost, BACKGROUND_TINT_PERCENT)
    gray = scale_channel(cell.brightness, config.brightness_boost)
    return (gray, gray, gray), None


def split_rows(height: int, workers: int) -> List[Tuple[int, int]]:
    """Contiguous [start, stop) row bands, at most `workers` of them, none empty."""
    if height <= 0:
        return []
    n = max(1, min(workers, height))
    base, extra = divmod(height, n)
    bands = []
    start = 0
    for i in range(n):
        stop = start + base + (1 if i < extra else 0)
        bands.append((start, stop))
        start = stop
    return bands


class RasterRenderer(RenderBackend):
    name = "raster"

    def render(self, grid: CellGrid, config: RenderConfig) -> Path:
        canvas = self.compose(grid, config)
        out = Path(config.output_path)
        try:
            canvas.save(out, format="PNG")
        except OSError as exc:
            raise ImageIOError(f"failed to write {out}: {exc}") from exc
        log.debug("Encoded %dx%d canvas to %s", canvas.width, canvas.height, out)
        return out

    def compose(self, grid: CellGrid, config: RenderConfig) -> Image.Image:
        font = load_font(config.font_path, config.font_size)
        canvas = Image.new("RGBA", canvas_size(grid.width, grid.height, config.font_size), BACKGROUND)
        if grid.width == 0 or grid.height == 0:
            return canvas

        _, ch = cell_size(config.font_size)
        bands = split_rows(grid.height, config.workers)
        if len(bands) == 1:
            images = [self._draw_band(grid, config, font)]
        else:
            log.debug("Drawing %d row bands in parallel", len(bands))
            with ThreadPoolExecutor(max_workers=len(bands)) as pool:
                images = list(pool.map(
                    lambda b: self._draw_band(grid.band(*b), config),
                    bands,
                ))

        for (start, _stop), band_img in zip(bands, images):
            canvas.paste(band_img, (PADDING, PADDING + start * ch))
        return canvas

    @staticmethod
    def _draw_band(
        band: CellGrid,
        config: RenderConfig,
        font: Optional[ImageFont.FreeTypeFont] = None,
    ) -> Image.Image:
        if font is None:
            font = load_font(config.font_path, config.font_size)
        cw, ch = cell_size(config.font_size)
        img = Image.new("RGBA", (band.width * cw, band.height * ch), BACKGROUND)
        draw = ImageDraw.Draw(img)
        ascent = font_ascent(font)

        for row in band.rows():
            for cell in row:
                fg, bg = cell_paint(cell, config)
                x0 = cell.x * cw
                y0 = (cell.y - band.row_offset) * ch
                if bg is not None:
                    draw.rectangle((x0, y0, x0 + cw - 1, y0 + ch - 1), fill=bg + (255,))
                # Baseline sits one ascent below the cell top so rows share a baseline.
                draw.text((x0, y0 + ascent), cell.glyph, fill=fg + (255,), font=font, anchor="ls")
        return img
