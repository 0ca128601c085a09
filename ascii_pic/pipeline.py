#!/usr/bin/env python3
# ascii_pic/pipeline.py
"""
Conversion pipeline for asciipic.

decode -> resize -> per-cell sampling -> render -> (encode)

One call converts one image start to finish. Any failure aborts the whole
conversion with an AsciiPicError; nothing is retried. A partially written
output file is not removed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from ascii_pic.config import RenderConfig
from ascii_pic.errors import DecodeError, GeometryError, ImageIOError
from ascii_pic.rendering.renderer import Renderer

__all__ = [
    "ConversionResult",
    "load_image",
    "render_text",
    "export_image",
    "convert_file",
]

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ConversionResult:
    text: Optional[str] = None
    output_path: Optional[Path] = None


def load_image(path: PathLike) -> Image.Image:
    """
    Decode the first frame of an image file into an RGB Pillow Image.
    The file is closed before returning, on success and failure alike.
    """
    try:
        fh = open(path, "rb")
    except OSError as exc:
        raise ImageIOError(f"failed to open file: {exc}") from exc

    with fh:
        try:
            with Image.open(fh) as im:
                im.load()
                img = im.convert("RGB")
        except Image.DecompressionBombError as exc:
            raise DecodeError(f"failed to decode image {path}: {exc}") from exc
        except UnidentifiedImageError as exc:
            raise DecodeError(f"failed to decode image {path}: unsupported format") from exc
        except (OSError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"failed to decode image {path}: {exc}") from exc

    if img.width == 0 or img.height == 0:
        raise GeometryError(f"image {path} has zero area ({img.width}x{img.height})")
    log.debug("Decoded %s (%dx%d)", path, img.width, img.height)
    return img


def render_text(img: Image.Image, config: RenderConfig, renderer: Optional[Renderer] = None) -> str:
    renderer = renderer or Renderer()
    return renderer.render(img, config, mode="terminal")


def export_image(img: Image.Image, config: RenderConfig, renderer: Optional[Renderer] = None) -> Path:
    renderer = renderer or Renderer()
    return renderer.render(img, config, mode="raster")


def convert_file(input_path: PathLike, config: RenderConfig, renderer: Optional[Renderer] = None) -> ConversionResult:
    img = load_image(input_path)
    if config.export_image:
        out = export_image(img, config, renderer)
        log.info("Exported %s to %s", input_path, out)
        return ConversionResult(output_path=out)
    return ConversionResult(text=render_text(img, config, renderer))
