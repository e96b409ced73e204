"""Logger setup for the command line and scripts."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    name: str = "prime_explorer",
    log_path: Path | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """Set up a logger that writes to the console and optionally a file.

    Args:
        name: Logger name; "prime_explorer" also captures library modules.
        log_path: Optional file receiving DEBUG and above.
        verbose: Show DEBUG messages on the console instead of INFO.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_path is not None:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger
