#!/usr/bin/env python3
# ascii_pic/rendering/fonts.py
"""
Font resolution for raster export.

Order: explicit font path, then a known system monospace font, then Pillow's
bundled scalable default. Whatever is chosen must load as a FreeType font.
"""

from __future__ import annotations

import logging
import os
import platform
from typing import List, Optional

from PIL import ImageFont

from ascii_pic.errors import FontLoadError

__all__ = ["find_default_mono_font", "load_font", "font_ascent"]

log = logging.getLogger(__name__)


def _mono_font_candidates() -> List[str]:
    system = platform.system()
    if system == "Darwin":
        return [
            "/System/Library/Fonts/Menlo.ttc",
            "/System/Library/Fonts/Monaco.ttf",
            "/Library/Fonts/Courier New.ttf",
        ]
    if system == "Windows":
        windir = os.environ.get("WINDIR", r"C:\Windows")
        return [
            os.path.join(windir, "Fonts", "CASCADIAMONO.TTF"),
            os.path.join(windir, "Fonts", "CONSOLA.TTF"),
            os.path.join(windir, "Fonts", "LUCON.TTF"),
        ]
    return [
        "/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationMono-Bold.ttf",
        "/usr/share/fonts/truetype/noto/NotoSansMono-Bold.ttf",
        "/usr/share/fonts/truetype/ubuntu/UbuntuMono-B.ttf",
    ]


def find_default_mono_font() -> Optional[str]:
    for p in _mono_font_candidates():
        if os.path.exists(p):
            return p
    return None


def load_font(font_path: Optional[str], size: int) -> ImageFont.FreeTypeFont:
    """Load the glyph font at size pixels. Raises FontLoadError on any failure."""
    path = font_path or find_default_mono_font()
    try:
        if path:
            font = ImageFont.truetype(path, size)
        else:
            font = ImageFont.load_default(size=size)
    except (OSError, ValueError) as exc:
        raise FontLoadError(f"failed to load font {path or '<builtin>'}: {exc}") from exc

    if not isinstance(font, ImageFont.FreeTypeFont):
        raise FontLoadError("no scalable font available (Pillow built without FreeType?)")
    log.debug("Loaded font %s at %dpx", path or "<builtin>", size)
    return font


def font_ascent(font: ImageFont.FreeTypeFont) -> int:
    ascent, _descent = font.getmetrics()
    return ascent
