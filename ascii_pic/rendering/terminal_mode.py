#!/usr/bin/env python3
# ascii_pic/rendering/terminal_mode.py
"""
Terminal text renderer.
One line per grid row. With colour on, every glyph carries its own 24-bit
foreground sequence and reset, so no colour state leaks between cells.
"""

from __future__ import annotations

from typing import List

from ascii_pic.config import RenderConfig
from ascii_pic.rendering.color import transform_color
from ascii_pic.rendering.renderer import CellGrid, RenderBackend

ESC = "\x1b"
RESET = ESC + "[0m"


def rgb_to_ansi_fg(r: int, g: int, b: int) -> str:
    """Return SGR foreground ANSI 24-bit sequence for color."""
    return f"{ESC}[38;2;{r};{g};{b}m"


class TerminalRenderer(RenderBackend):
    name = "terminal"

    def render(self, grid: CellGrid, config: RenderConfig) -> str:
        out: List[str] = []
        for row in grid.rows():
            if config.color:
                for cell in row:
                    fg, _ = transform_color(cell.color)
                    out.append(f"{rgb_to_ansi_fg(*fg)}{cell.glyph}{RESET}")
            else:
                out.extend(cell.glyph for cell in row)
            out.append("\n")
        return "".join(out)
