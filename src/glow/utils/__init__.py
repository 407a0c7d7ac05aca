"""Utility modules for Glow.

Provides:
- logger: get_logger for logging
"""

from glow.utils.logger import get_logger

__all__ = [
    "get_logger",
]
