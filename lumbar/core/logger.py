"""Logger configuration."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logger(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Send loguru output to stderr and, when *log_file* is set, to a size-rotated file.

    Safe to call more than once: previously added sinks are removed.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - {message}",
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, level=level, rotation="10 MB",
                   format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}")
