"""ANSI color functions for terminal output.

Each color function wraps text in an SGR color code and a reset. The
COLORS table maps the color names accepted in colorscheme config to these
functions; "default" maps to the identity function.

Usage:
    >>> from glow.ansi import red, strip_colors
    >>> red("defn")
    '\\x1b[31mdefn\\x1b[0m'
    >>> strip_colors(red("defn"))
    'defn'
"""

from __future__ import annotations

import re
from collections.abc import Callable

from glow.errors import ColorschemeError

RESET = "\033[0m"

# SGR foreground codes
_SGR: dict[str, str] = {
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "bright-red": "91",
    "bright-green": "92",
}

# Matches any SGR sequence (colors, resets, attributes)
_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def _wrapper(code: str) -> Callable[[str], str]:
    prefix = f"\033[{code}m"

    def wrap(text: str) -> str:
        # Empty spans stay empty so no stray escape codes are emitted
        if not text:
            return text
        return f"{prefix}{text}{RESET}"

    return wrap


def default(text: str) -> str:
    """Identity color: returns text unchanged."""
    return text


red = _wrapper(_SGR["red"])
green = _wrapper(_SGR["green"])
yellow = _wrapper(_SGR["yellow"])
blue = _wrapper(_SGR["blue"])
magenta = _wrapper(_SGR["magenta"])
cyan = _wrapper(_SGR["cyan"])
bright_red = _wrapper(_SGR["bright-red"])
bright_green = _wrapper(_SGR["bright-green"])

COLORS: dict[str, Callable[[str], str]] = {
    "red": red,
    "green": green,
    "yellow": yellow,
    "blue": blue,
    "magenta": magenta,
    "cyan": cyan,
    "bright-red": bright_red,
    "bright-green": bright_green,
    "default": default,
}


def color_fn(name: str) -> Callable[[str], str]:
    """Get the color function for a color name.

    Names are matched case-insensitively; ``_`` and a leading ``:`` are
    accepted, so ``"bright_red"`` and ``":bright-red"`` both work.

    Raises:
        ColorschemeError: If the name is not a known color
    """
    key = name.strip().lstrip(":").lower().replace("_", "-")
    fn = COLORS.get(key)
    if fn is None:
        known = ", ".join(sorted(COLORS))
        raise ColorschemeError(name, f"unknown color (expected one of: {known})")
    return fn


def strip_colors(text: str) -> str:
    """Remove all SGR escape sequences from text."""
    return _SGR_RE.sub("", text)


__all__ = [
    "COLORS",
    "RESET",
    "blue",
    "bright_green",
    "bright_red",
    "color_fn",
    "cyan",
    "default",
    "green",
    "magenta",
    "red",
    "strip_colors",
    "yellow",
]
