#!/usr/bin/env python3
# ascii_pic/rendering/palettes.py
"""
Glyph palettes.

Each palette is a single-letter id plus a glyph ramp ordered darkest to brightest.
The registry is built once at import and never mutated; renderers receive it by reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

__all__ = [
    "GlyphPalette",
    "PALETTES",
    "DEFAULT_PALETTE_ID",
    "default_palettes",
    "has_palette",
    "get_palette",
    "glyph_index",
    "glyph_for",
]

DEFAULT_PALETTE_ID = "a"


@dataclass(frozen=True)
class GlyphPalette:
    id: str
    description: str
    glyphs: Tuple[str, ...]

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError(f"palette {self.id!r} has no glyphs")

    def __len__(self) -> int:
        return len(self.glyphs)

    @property
    def ramp(self) -> str:
        return "".join(self.glyphs)

    def index(self, brightness: int) -> int:
        return glyph_index(brightness, len(self.glyphs))

    def glyph(self, brightness: int) -> str:
        return self.glyphs[self.index(brightness)]


def _palette(pid: str, description: str, ramp: str) -> GlyphPalette:
    return GlyphPalette(pid, description, tuple(ramp))


# -------------------------
# Registry
# -------------------------

PALETTES: Mapping[str, GlyphPalette] = MappingProxyType({
    p.id: p
    for p in (
        _palette("a", "Classic ASCII", " .:-=+*#%@"),
        _palette("b", "Blocks", " ░▒▓█"),
        _palette("c", "Dots", " ·•○◉●"),
        _palette("d", "Vertical Bars", "  ▂▃▄▅▆▇█"),
        _palette("e", "Braille", " ⣀⣄⣤⣦⣶⣷⣿"),
        _palette("f", "Numbers", " 123456789"),
        _palette("g", "Letters", " abcdefghi"),
        _palette("h", "Slashes", " /\\|-+x*#@"),
        _palette("i", "Punctuation", " `.,:;!><~"),
        _palette("j", "Mixed Blocks", " ░▒▓█▀▄▌▐"),
        _palette("k", "Braille Advanced", "⠀⠁⠃⠇⠏⠟⠿⡿⣿"),
        _palette("l", "Circle Fill", " ○◔◐◕⬤"),
        _palette("m", "Box Drawing", " ┤┴├┬┼╬█"),
        _palette("n", "Dot Sizes", " ˙·•●⚫"),
        _palette("o", "Math Symbols", " ⋅∘∙○◎⦿●"),
    )
})


def default_palettes() -> Mapping[str, GlyphPalette]:
    return PALETTES


def has_palette(pid: Optional[str], palettes: Mapping[str, GlyphPalette] = PALETTES) -> bool:
    return bool(pid) and pid.lower() in palettes


def get_palette(pid: Optional[str], palettes: Mapping[str, GlyphPalette] = PALETTES) -> GlyphPalette:
    """Case-insensitive lookup. Unknown or empty ids fall back to the default palette."""
    if pid and pid.lower() in palettes:
        return palettes[pid.lower()]
    return palettes[DEFAULT_PALETTE_ID]


def glyph_index(brightness: int, size: int) -> int:
    """floor(b * N / 256), clamped to N - 1."""
    idx = int(brightness) * size // 256
    if idx >= size:
        idx = size - 1
    return max(0, idx)


def glyph_for(brightness: int, palette: GlyphPalette) -> str:
    return palette.glyph(brightness)
