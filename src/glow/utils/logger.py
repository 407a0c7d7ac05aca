"""Minimal logging utilities for Glow.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from glow.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Highlighting %d chars", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "glow." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'glow.mymodule'
    """
    if not (name == "glow" or name.startswith("glow.")):
        name = f"glow.{name}"
    return logging.getLogger(name)
