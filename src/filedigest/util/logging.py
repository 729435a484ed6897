"""Logging setup utilities for the filedigest command line."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOGGER_NAME = "filedigest"


def configure_logging(*, log_path: Path | None = None, level: int = logging.INFO) -> logging.Logger:
    """Configure the ``filedigest`` logger with a stderr handler and optional log file.

    Safe to call repeatedly: handlers are only added once, and stream handlers
    whose stream has since been closed are replaced.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        stream = getattr(handler, "stream", None)
        if not isinstance(handler, logging.FileHandler) and getattr(stream, "closed", False):
            logger.removeHandler(handler)

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler) for h in logger.handlers
    )
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if not has_stream:
        # stdout carries digests, so log lines go to stderr
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
