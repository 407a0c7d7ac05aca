"""ContextVar-based highlight configuration for Glow.

Provides thread-local defaults using Python's ContextVars (PEP 567). The
config supplies the colorscheme, matcher and match cap that highlight()
uses when the caller does not pass them explicitly.

highlight() never rebinds this config: a per-call colorscheme is threaded
through the chain as an argument, so concurrent and nested calls cannot see
each other's overrides.

Usage:
    from glow.config import HighlightConfig, highlight_config_context

    with highlight_config_context(HighlightConfig(max_matches=10_000)):
        out = highlight(source)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from glow.colorscheme import DEFAULT_COLORSCHEME, Colorscheme
from glow.patterns import DEFAULT_MATCHER
from glow.protocols import MatcherProvider


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        colorscheme: Colorscheme used when highlight() gets no override
        matcher: Matcher provider queried for each category
        max_matches: Cap on claimed spans per call; once reached, the rest
            of the input is emitted uncolored. None means no cap.

    """

    colorscheme: Colorscheme = DEFAULT_COLORSCHEME
    matcher: MatcherProvider = field(default=DEFAULT_MATCHER)
    max_matches: int | None = None

    def __post_init__(self) -> None:
        if self.max_matches is not None and self.max_matches < 0:
            msg = f"max_matches must be >= 0 or None, got {self.max_matches}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Only includes keys that are valid HighlightConfig fields; unknown keys
        are silently ignored. A ``colorscheme`` given as a plain mapping is
        converted with Colorscheme.from_dict.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "colorscheme": {"string": "blue"},
            ...     "max_matches": 500,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_matches
            500

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        scheme = filtered.get("colorscheme")
        if scheme is not None and not isinstance(scheme, Colorscheme):
            filtered["colorscheme"] = Colorscheme.from_dict(scheme)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated highlighting.

    Example:
        >>> with highlight_config_context(HighlightConfig(colorscheme=NO_COLOR)):
        ...     plain = highlight("(defn f [])")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.reset(token)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "highlight_config_context",
    "reset_highlight_config",
    "set_highlight_config",
]
