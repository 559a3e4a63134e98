"""Logging configuration for assertion debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "plainassert",
    level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Configure and return a logger for assertion debug output.

    Writes to debug_file when one is given. Optionally also writes to stderr if verbose=True.

    Args:
        debug_file: Path to debug log file (created along with its parent directories)
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance. The default configures every
            ``plainassert.*`` module logger through propagation.
        level: Minimum level recorded by the logger and its handlers.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers for this specific logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode='a')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
