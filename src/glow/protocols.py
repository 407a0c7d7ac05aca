"""Protocols for Glow.

Defines the contract for matcher providers, so the pattern tables can be
swapped without touching the highlighter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from glow.categories import Category

# A color function wraps a span in terminal color codes
ColorFn = Callable[[str], str]


@runtime_checkable
class MatcherProvider(Protocol):
    """Protocol for per-category pattern lookup.

    Thread Safety:
        Implementations must be stateless or immutable. find() may be
        called concurrently from multiple threads.

    """

    def find(self, category: Category, text: str) -> tuple[int, int] | None:
        """Find the leftmost occurrence of a category in text.

        Args:
            category: Category to look for
            text: Fragment to search

        Returns:
            (start, end) offsets of the leftmost match, or None

        Contract:
            - MUST NOT raise for string input
            - MUST return None (not an empty span) when nothing matches
        """
        ...


__all__ = [
    "ColorFn",
    "MatcherProvider",
]
