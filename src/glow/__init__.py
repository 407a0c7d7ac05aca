"""
Glow — Clojure syntax highlighting for the terminal

Colors Clojure source with ANSI escape codes by claiming spans in a fixed
category order: regexes, strings, comments, keywords, brackets, nil,
booleans, numbers, macros, special forms, reader characters, definitions,
core functions, earmuffed variables, conditionals, loops and exception
forms. Text that matches nothing is left as-is.

Quick Start:
    >>> from glow import highlight
    >>> print(highlight('(defn greet [name] (str "Hello, " name))'))

Custom Colorschemes:
    >>> # Replaces the default entirely: unlisted categories stay plain
    >>> highlight(source, {"string": "blue", "number": "green"})

    >>> # Callables work too
    >>> highlight(source, {Category.COMMENT: lambda s: f"\\033[2m{s}\\033[0m"})

Building On The Registry:
    >>> from glow import Category, colorize, DEFAULT_COLORSCHEME
    >>> colorize("nil", Category.NIL)

Installation:
    pip install glow-clj
"""

from glow.ansi import strip_colors
from glow.categories import CATEGORY_ORDER, Category
from glow.chain import highlight, split_at
from glow.colorscheme import (
    DEFAULT_COLORSCHEME,
    NO_COLOR,
    Colorscheme,
    colorize,
    resolve,
)
from glow.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from glow.errors import ColorschemeError, GlowError, PatternError
from glow.patterns import DEFAULT_MATCHER, RegexMatcher, find
from glow.profiling import HighlightAccumulator, get_highlight_accumulator, profiled_highlight
from glow.protocols import ColorFn, MatcherProvider

__version__ = "0.3.0"

__all__ = [
    "CATEGORY_ORDER",
    "DEFAULT_COLORSCHEME",
    "DEFAULT_MATCHER",
    "NO_COLOR",
    "Category",
    "ColorFn",
    "Colorscheme",
    "ColorschemeError",
    "GlowError",
    "HighlightAccumulator",
    "HighlightConfig",
    "MatcherProvider",
    "PatternError",
    "RegexMatcher",
    "__version__",
    "colorize",
    "find",
    "get_highlight_accumulator",
    "get_highlight_config",
    "highlight",
    "highlight_config_context",
    "profiled_highlight",
    "reset_highlight_config",
    "resolve",
    "set_highlight_config",
    "split_at",
    "strip_colors",
]
