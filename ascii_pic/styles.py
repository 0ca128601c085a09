#!/usr/bin/env python3
# ascii_pic/styles.py
"""
Style definitions for the palette listing.
Provides light, dark, and auto themes for prompt_toolkit.
"""

import os

from prompt_toolkit.styles import Style
from ascii_pic.config import Config

BASE_DARK = {
    "title": "#ffffff bold",
    "rule": "#666666",
    "key": "#00ff00 bold",
    "desc": "#cccccc",
    "ramp": "#ffffff",
    "comment": "#888888 italic",
    "command": "#87afff",
}
BASE_LIGHT = {
    "title": "#000000 bold",
    "rule": "#999999",
    "key": "#006600 bold",
    "desc": "#333333",
    "ramp": "#000000",
    "comment": "#666666 italic",
    "command": "#00008b",
}


def make_style(cfg: Config) -> Style:
    theme = cfg["ui"].get("theme", "auto")

    if theme == "light":
        return Style.from_dict(BASE_LIGHT)
    if theme == "dark":
        return Style.from_dict(BASE_DARK)

    # Auto-detect via environment
    if os.getenv("TERM_THEME", "").lower() == "light":
        return Style.from_dict(BASE_LIGHT)
    return Style.from_dict(BASE_DARK)
