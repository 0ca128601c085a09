#!/usr/bin/env python3
# ascii_pic/rendering/renderer.py
"""
Rendering dispatcher and the shared cell grid.

- build_grid() turns a resampled (H, W, 3) array into a CellGrid: luminance and
  palette index for every cell, computed at once with numpy.
- Backends implement RenderBackend.render(grid, config).
- Renderer resizes, builds the grid and hands it to the backend for the mode
  ("terminal" for escape-coded text, "raster" for a PNG of drawn glyphs).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

import numpy as np
from PIL import Image

from ascii_pic.config import RenderConfig
from ascii_pic.rendering.color import RGB, luminance_array
from ascii_pic.rendering.palettes import PALETTES, GlyphPalette, get_palette
from ascii_pic.rendering.resize import resize_to_grid

__all__ = [
    "CharacterCell",
    "CellGrid",
    "build_grid",
    "RenderBackend",
    "Renderer",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharacterCell:
    glyph: str
    color: RGB          # unboosted source colour
    brightness: int
    x: int
    y: int


@dataclass(frozen=True)
class CellGrid:
    """
    Sampled grid. Arrays are indexed [row, column].
    row_offset is the grid row of this grid's first row (non-zero for bands).
    """
    palette: GlyphPalette
    rgb: np.ndarray           # (H, W, 3) uint8
    brightness: np.ndarray    # (H, W) int32
    index: np.ndarray         # (H, W) int32
    row_offset: int = 0

    @property
    def width(self) -> int:
        return int(self.rgb.shape[1])

    @property
    def height(self) -> int:
        return int(self.rgb.shape[0])

    def cell(self, x: int, y: int) -> CharacterCell:
        r, g, b = (int(v) for v in self.rgb[y, x, :3])
        return CharacterCell(
            glyph=self.palette.glyphs[int(self.index[y, x])],
            color=(r, g, b),
            brightness=int(self.brightness[y, x]),
            x=x,
            y=y + self.row_offset,
        )

    def rows(self) -> Iterator[List[CharacterCell]]:
        for y in range(self.height):
            yield [self.cell(x, y) for x in range(self.width)]

    def band(self, start: int, stop: int) -> "CellGrid":
        """Rows [start, stop) as their own grid, keeping absolute row numbers."""
        return CellGrid(
            palette=self.palette,
            rgb=self.rgb[start:stop],
            brightness=self.brightness[start:stop],
            index=self.index[start:stop],
            row_offset=self.row_offset + start,
        )


def build_grid(arr: np.ndarray, palette: GlyphPalette) -> CellGrid:
    if arr.ndim != 3 or arr.shape[2] < 3:
        raise ValueError(f"expected (H, W, 3) array, got shape {arr.shape}")
    rgb = np.ascontiguousarray(arr[..., :3], dtype=np.uint8)
    lum = luminance_array(rgb)
    n = len(palette.glyphs)
    idx = np.minimum(lum * n // 256, n - 1).astype(np.int32)
    return CellGrid(palette=palette, rgb=rgb, brightness=lum, index=idx)


# -------------------------
# Backends
# -------------------------

class RenderBackend:
    """Interface for all renderers."""
    name: str = "base"

    def render(self, grid: CellGrid, config: RenderConfig) -> Any:
        raise NotImplementedError


# -------------------------
# Dispatcher
# -------------------------

@dataclass
class Renderer:
    """
    Rendering strategy holder.
    The palette table is shared read-only; backends are registered per mode.
    """
    palettes: Mapping[str, GlyphPalette] = field(default_factory=lambda: PALETTES)

    def __post_init__(self):
        # Imported here: both backends import this module for CellGrid.
        from ascii_pic.rendering.raster_mode import RasterRenderer
        from ascii_pic.rendering.terminal_mode import TerminalRenderer

        self._backends: Dict[str, RenderBackend] = {}
        self.register("terminal", TerminalRenderer())
        self.register("raster", RasterRenderer())

    def register(self, mode: str, backend: RenderBackend) -> None:
        self._backends[mode] = backend

    def backend(self, mode: str) -> RenderBackend:
        try:
            return self._backends[mode]
        except KeyError:
            raise ValueError(f"unknown render mode {mode!r}") from None

    def get_palette(self, pid: Optional[str]) -> GlyphPalette:
        return get_palette(pid, self.palettes)

    def sample(self, img: Image.Image, config: RenderConfig) -> CellGrid:
        arr = resize_to_grid(img, config.width)
        return build_grid(arr, self.get_palette(config.palette_id))

    def render(self, img: Image.Image, config: RenderConfig, mode: Optional[str] = None) -> Any:
        if mode is None:
            mode = "raster" if config.export_image else "terminal"
        backend = self.backend(mode)
        grid = self.sample(img, config)
        log.debug("Rendering %dx%d grid with %s backend", grid.width, grid.height, backend.name)
        return backend.render(grid, config)
