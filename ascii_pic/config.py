#!/usr/bin/env python3
# ascii_pic/config.py
"""
Config loader/saver, defaults and the per-conversion RenderConfig.

Goals:
- Single optional JSON file per user.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.
- RenderConfig.from_config() is the strict boundary: unknown palettes are rejected there.

Usage:
    from ascii_pic.config import Config, RenderConfig
    cfg = Config.load()                 # ~/.config/ascii_pic/ascii_pic.json or OS-specific
    cfg.update({"render": {"width": 120, "color": True}})
    rc = RenderConfig.from_config(cfg)
"""

from __future__ import annotations

import copy
import json
import logging
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ascii_pic.errors import ConfigValidationError
from ascii_pic.rendering.palettes import DEFAULT_PALETTE_ID, PALETTES, has_palette

log = logging.getLogger(__name__)

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "render": {
        "width": 80,                      # output width in characters
        "color": False,                   # 24-bit colour
        "palette": DEFAULT_PALETTE_ID,    # a..o, see `asciipic --list`
        "export_image": False,            # PNG instead of terminal text
        "output": "ascii-art.png",
        "font_size": 8,                   # pixels, PNG export only
        "brightness": 110,                # percent boost, PNG export only
        "font_path": None,                # auto if None: system mono font or Pillow default
        "workers": 1,                     # row bands drawn in parallel
    },
    "ui": {
        "theme": "auto",                  # auto | light | dark
    },
    "logging": {
        "level": "WARNING",
        "file": None,                     # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "AsciiPic")
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "AsciiPic")
    return os.path.join(os.path.expanduser("~/.config"), "ascii_pic")

def _default_config_path() -> str:
    """Resolve default config path, honoring ASCII_PIC_CONFIG env override."""
    env = os.environ.get("ASCII_PIC_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ascii_pic.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=os.path.dirname(path) or ".")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp, path)
    except OSError:
        # Clean temp on error
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied. Palette ids are only normalised here."""
    c = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), copy.deepcopy(cfg or {}))
    d = DEFAULT_CONFIG["render"]

    r = c["render"]
    r["width"]        = _coerce_int(r.get("width"), d["width"], (1, 4000))
    r["color"]        = _coerce_bool(r.get("color"), d["color"])
    r["palette"]      = str(r.get("palette") or d["palette"]).strip().lower()
    r["export_image"] = _coerce_bool(r.get("export_image"), d["export_image"])
    r["output"]       = str(r.get("output") or d["output"])
    r["font_size"]    = _coerce_int(r.get("font_size"), d["font_size"], (1, 50))
    r["brightness"]   = _coerce_int(r.get("brightness"), d["brightness"], (50, 200))
    fp = r.get("font_path")
    r["font_path"]    = os.path.expanduser(str(fp)) if fp else None
    r["workers"]      = _coerce_int(r.get("workers"), d["workers"], (1, 32))

    ui = c["ui"]
    if ui.get("theme") not in ("auto", "light", "dark"):
        ui["theme"] = DEFAULT_CONFIG["ui"]["theme"]

    lg = c["logging"]
    level = str(lg.get("level") or "").upper()
    lg["level"] = level if level in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET") \
        else DEFAULT_CONFIG["logging"]["level"]
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/save/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate(DEFAULT_CONFIG))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self.data[k] = v

    def get(self, k: str, default: Any = None) -> Any:
        return self.data.get(k, default)

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = False) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate(DEFAULT_CONFIG)
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("top level is not an object")
        except (OSError, ValueError) as exc:
            # Corrupt file. Backup and fall back to defaults.
            log.warning("Ignoring unreadable config %s: %s", cfg_path, exc)
            try:
                shutil.copyfile(cfg_path, cfg_path + ".corrupt.bak")
            except OSError:
                pass
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def save(self) -> None:
        """Persist to JSON atomically."""
        self.data = _validate(self.data)
        _atomic_write_json(self.path, self.data)

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)


@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable settings for one conversion.
    palette_id is not checked here; the core falls back to the default palette.
    """
    width: int = 80
    color: bool = False
    palette_id: str = DEFAULT_PALETTE_ID
    export_image: bool = False
    output_path: str = "ascii-art.png"
    font_size: int = 8
    brightness_boost: int = 110
    font_path: Optional[str] = None
    workers: int = 1

    def __post_init__(self):
        if self.width < 1:
            raise ConfigValidationError(f"width must be a positive integer, got {self.width}")
        if self.font_size < 1:
            raise ConfigValidationError(f"font size must be a positive integer, got {self.font_size}")
        if self.workers < 1:
            raise ConfigValidationError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_config(cls, cfg: Config) -> "RenderConfig":
        r = cfg["render"]
        palette = str(r["palette"]).lower()
        if not has_palette(palette, PALETTES):
            raise ConfigValidationError(
                f"Invalid charset '{r['palette']}'. Use --list to see available sets."
            )
        return cls(
            width=r["width"],
            color=r["color"],
            palette_id=palette,
            export_image=r["export_image"],
            output_path=r["output"],
            font_size=r["font_size"],
            brightness_boost=r["brightness"],
            font_path=r["font_path"],
            workers=r["workers"],
        )


__all__ = [
    "Config",
    "RenderConfig",
    "DEFAULT_CONFIG",
    "_default_config_path",
]
