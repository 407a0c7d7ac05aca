"""Glow HighlightAccumulator — opt-in profiling for highlighting.

This module provides accumulated metrics during highlighting:
- Total time
- Source length
- Claimed spans per category
- Fragments processed by the chain

Zero overhead when disabled (get_highlight_accumulator() returns None).

Example:
    from glow import highlight
    from glow.profiling import profiled_highlight

    with profiled_highlight() as metrics:
        highlight("(defn f [x] (inc x))")

    print(metrics.summary())
    # {"total_ms": 0.4, "source_length": 20, "matches": 9, ...}

"""

from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from glow.categories import Category


@dataclass
class HighlightAccumulator:
    """Accumulated metrics during highlighting.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources highlighted.
        highlight_calls: Number of highlight() calls recorded.
        fragments: Number of (fragment, category) steps the chain ran.
        matches: Claimed spans per category.
        truncated_calls: Calls that hit the max_matches cap.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    highlight_calls: int = 0
    fragments: int = 0
    matches: Counter[Category] = field(default_factory=Counter)
    truncated_calls: int = 0

    def record_highlight(
        self,
        source_length: int,
        matches: Counter[Category],
        fragments: int,
        truncated: bool = False,
    ) -> None:
        """Record one highlight call."""
        self.highlight_calls += 1
        self.source_length += source_length
        self.fragments += fragments
        self.matches.update(matches)
        if truncated:
            self.truncated_calls += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    @property
    def total_matches(self) -> int:
        """Claimed spans across all categories."""
        return sum(self.matches.values())

    def summary(self) -> dict[str, Any]:
        """Get summary of highlight metrics.

        Returns:
            Dict with total_ms, source_length, highlight_calls, fragments,
            matches, truncated_calls, and by_category (tag -> count).

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "highlight_calls": self.highlight_calls,
            "fragments": self.fragments,
            "matches": self.total_matches,
            "truncated_calls": self.truncated_calls,
            "by_category": {c.value: n for c, n in self.matches.items()},
        }


_accumulator: ContextVar[HighlightAccumulator | None] = ContextVar(
    "highlight_accumulator",
    default=None,
)


def get_highlight_accumulator() -> HighlightAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_highlight() -> Iterator[HighlightAccumulator]:
    """Context manager for profiled highlighting.

    Creates a HighlightAccumulator and makes it available via
    get_highlight_accumulator() for the duration of the with block.

    """
    acc = HighlightAccumulator()
    token: Token[HighlightAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "HighlightAccumulator",
    "get_highlight_accumulator",
    "profiled_highlight",
]
