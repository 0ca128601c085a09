#!/usr/bin/env python3
# ascii_pic/errors.py
"""
Exception taxonomy for the conversion pipeline.
Every error is fatal to the current conversion; callers catch AsciiPicError.
"""

from __future__ import annotations

__all__ = [
    "AsciiPicError",
    "GeometryError",
    "DecodeError",
    "FontLoadError",
    "ImageIOError",
    "ConfigValidationError",
]


class AsciiPicError(Exception):
    """Base class for all conversion failures."""


class GeometryError(AsciiPicError):
    """Source image has zero width or height."""


class DecodeError(AsciiPicError):
    """Source image is unreadable or in an unsupported format."""


class FontLoadError(AsciiPicError):
    """Font asset could not be loaded or parsed."""


class ImageIOError(AsciiPicError, OSError):
    """Input could not be opened or output could not be written."""


class ConfigValidationError(AsciiPicError, ValueError):
    """Configuration rejected at the outer boundary."""
