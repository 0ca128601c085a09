#!/usr/bin/env python3
# ascii_pic/logging_conf.py
"""
Central logging setup for asciipic.
Logs go to stderr so stdout carries only the art. Optional rotating file log.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional
from ascii_pic.config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(cfg: Config, level_override: Optional[str] = None) -> None:
    level_name = (level_override or cfg["logging"].get("level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    log_file = cfg["logging"].get("file")
    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg["logging"].get("rotate_bytes", 5 * 1024 * 1024)),
            backupCount=int(cfg["logging"].get("rotate_keep", 3)),
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)

    # Pillow's plugin loader is chatty at DEBUG
    logging.getLogger("PIL").setLevel(max(level, logging.INFO))
