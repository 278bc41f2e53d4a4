"""
Logging Setup
=============

Console and optional file sinks for loguru.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from typing import Optional

from loguru import logger


def setup_logger(
    level: str = "INFO",
    log_dir: Optional[str] = None,
    enable_colors: bool = True
) -> Optional[str]:
    """
    Replace loguru's default handler with a formatted console sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ...).
        log_dir: If given, also log to a timestamped file in this directory.
        enable_colors: Colorize console output when attached to a TTY.

    Returns:
        Path of the log file, or None when logging to the console only.
    """
    logger.remove()

    colorize = enable_colors and sys.stderr.isatty()
    if colorize:
        console_format = (
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<yellow>{line}</yellow> | "
            "<level>{message}</level>"
        )
    else:
        console_format = "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{line} | {message}"

    logger.add(sys.stderr, level=level, format=console_format, colorize=colorize)

    if log_dir is None:
        return None

    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"brick_layout_{timestamp}.log")
    logger.add(
        log_file,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
        encoding="utf-8"
    )
    logger.debug("Logging to {}", log_file)
    return log_file
