#!/usr/bin/env python3
# ascii_pic/listing.py
"""Palette listing and usage examples, printed with prompt_toolkit styles."""

from __future__ import annotations

import sys
from typing import List, Mapping, Optional, TextIO, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from ascii_pic.config import Config
from ascii_pic.rendering.palettes import PALETTES, GlyphPalette
from ascii_pic.styles import make_style
from ascii_pic.version import version_info

Fragments = List[Tuple[str, str]]

_RULE = "━" * 41

_EXAMPLES = (
    ("Basic terminal output", "asciipic -i photo.jpg"),
    ("With TRUE color (for terminal)", "asciipic -i photo.jpg --color"),
    ("Braille characters (high detail)", "asciipic -i photo.jpg -c e --color -w 150"),
    ("Export as PNG image (vibrant glow effect)",
     "asciipic -i photo.jpg --png --color -c b --fontsize 12 -w 200 -o art.png"),
    ("Darker/moody PNG export", "asciipic -i photo.jpg --png --color --brightness 80 -o dark.png"),
)


def palette_fragments(palettes: Mapping[str, GlyphPalette] = PALETTES) -> Fragments:
    frags: Fragments = [
        ("class:title", f"{version_info()} - Image to ASCII Art Converter\n"),
        ("", "\n"),
        ("class:title", "Available Character Sets:\n"),
        ("class:rule", _RULE + "\n"),
    ]
    for pid in sorted(palettes):
        p = palettes[pid]
        frags += [
            ("", "  "),
            ("class:key", f"{pid}"),
            ("", ": "),
            ("class:desc", f"{p.description:<16}"),
            ("", " → "),
            ("class:ramp", p.ramp),
            ("", "\n"),
        ]
    return frags


def usage_fragments() -> Fragments:
    frags: Fragments = [
        ("", "\n"),
        ("class:title", "Usage Examples:\n"),
        ("class:rule", _RULE + "\n"),
    ]
    for comment, command in _EXAMPLES:
        frags += [
            ("class:comment", f"  # {comment}\n"),
            ("class:command", f"  {command}\n"),
            ("", "\n"),
        ]
    return frags


def print_palettes(cfg: Config, with_usage: bool = False, file: Optional[TextIO] = None) -> None:
    frags = palette_fragments()
    if with_usage:
        frags += usage_fragments()
    print_formatted_text(
        FormattedText(frags),
        style=make_style(cfg),
        end="",
        file=file or sys.stdout,
    )
