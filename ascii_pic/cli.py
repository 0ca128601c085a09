#!/usr/bin/env python3
# ascii_pic/cli.py
"""
Entry point for asciipic.
Loads configuration, applies command-line overrides and runs one conversion.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from ascii_pic.config import Config, RenderConfig
from ascii_pic.errors import AsciiPicError
from ascii_pic.listing import print_palettes
from ascii_pic.logging_conf import setup_logging
from ascii_pic.pipeline import convert_file
from ascii_pic.version import version_info

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="asciipic",
        description="Convert an image to ASCII art in the terminal or as a PNG.",
    )
    p.add_argument("-i", "--input", help="Path to input image file")
    p.add_argument("-w", "--width", type=int, help="Output width in characters (default 80)")
    p.add_argument("--color", action="store_true", default=None,
                   help="Enable TRUE color output (preserves original colors)")
    p.add_argument("--png", action="store_true", default=None, help="Export as PNG image")
    p.add_argument("-o", "--output", help="Output path for PNG export (default ascii-art.png)")
    p.add_argument("-c", "--charset", help="Character set to use (a-o). Use --list to see all sets")
    p.add_argument("--fontsize", type=int, help="Font size in pixels for PNG export (1-50, default 8)")
    p.add_argument("--brightness", type=int,
                   help="Brightness boost for PNG export (50-200, default 110 = +10%%)")
    p.add_argument("--font", help="Path to a .ttf/.otf font for PNG export")
    p.add_argument("--workers", type=int, help="Row bands drawn in parallel for PNG export")
    p.add_argument("--config", help="Path to JSON config file")
    p.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    p.add_argument("--list", action="store_true", help="List character sets and exit")
    p.add_argument("--version", action="version", version=version_info())
    return p


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    render: Dict[str, Any] = {}
    pairs = (
        ("width", args.width),
        ("color", args.color),
        ("export_image", args.png),
        ("output", args.output),
        ("palette", args.charset),
        ("font_size", args.fontsize),
        ("brightness", args.brightness),
        ("font_path", args.font),
        ("workers", args.workers),
    )
    for key, value in pairs:
        if value is not None:
            render[key] = value
    return {"render": render}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = Config.load(args.config)
    setup_logging(cfg, args.log_level)

    if args.list:
        print_palettes(cfg, with_usage=True)
        return 0

    if args.width is not None and args.width < 1:
        print(f"Error: width must be a positive integer, got {args.width}", file=sys.stderr)
        return 1

    cfg.update(_overrides(args))
    try:
        config = RenderConfig.from_config(cfg)
    except AsciiPicError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not args.input:
        print_palettes(cfg, with_usage=True)
        return 1

    try:
        result = convert_file(args.input, config)
    except AsciiPicError as exc:
        log.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result.output_path is not None:
        print(f"Exported to: {result.output_path} (brightness: {config.brightness_boost}%)")
    else:
        sys.stdout.write(result.text)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
