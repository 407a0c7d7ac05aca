"""Category registry: colorschemes and span coloring.

A Colorscheme maps each Category to a color function. Categories a
colorscheme does not mention are left uncolored. A caller-supplied
colorscheme always replaces the default wholesale; it is never merged
with DEFAULT_COLORSCHEME.

Thread Safety:
Colorscheme is immutable after creation. Safe to share.

Example:
    >>> from glow.colorscheme import Colorscheme, colorize
    >>> scheme = Colorscheme({"string": "blue", "number": "green"})
    >>> colorize("42", "number", scheme)
    '\\x1b[32m42\\x1b[0m'
    >>> colorize("nil", "nil", scheme)  # not in scheme: identity
    'nil'
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from glow.ansi import color_fn, default
from glow.categories import CATEGORY_ORDER, Category
from glow.errors import ColorschemeError
from glow.protocols import ColorFn
from glow.utils.logger import get_logger

logger = get_logger(__name__)

ColorSpec = ColorFn | str


class Colorscheme:
    """Immutable mapping from Category to color function.

    Values may be callables (``str -> str``) or ANSI color names such as
    ``"cyan"`` or ``"bright-red"``; names are resolved once, at
    construction.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_fns", "_names")

    def __init__(self, colors: Mapping[Category | str, ColorSpec] | None = None) -> None:
        """Build a colorscheme.

        Args:
            colors: Mapping of category (enum member or tag) to color

        Raises:
            ColorschemeError: For an unknown color name, or a value that is
                neither a name nor callable. Unknown categories are skipped.
        """
        fns: dict[Category, ColorFn] = {}
        names: dict[Category, str] = {}
        for key, spec in (colors or {}).items():
            category = Category.parse(key)
            if category is None:
                logger.debug("Ignoring colorscheme entry for unknown category %r", key)
                continue
            if isinstance(spec, str):
                fns[category] = color_fn(spec)
                names[category] = spec
            elif callable(spec):
                fns[category] = spec
            else:
                raise ColorschemeError(
                    category.value,
                    f"expected a color name or callable, got {type(spec).__name__}",
                )
        self._fns = MappingProxyType(fns)
        self._names = MappingProxyType(names)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, str]) -> Colorscheme:
        """Create a Colorscheme from string-keyed config.

        Useful for colorschemes loaded from JSON or TOML, e.g.
        ``{"string": "blue", ":number": "green"}``.
        """
        return cls(dict(config_dict))

    def get(self, category: Category | str) -> ColorFn:
        """Get the color function for a category.

        Returns:
            The registered function, or identity if the category is absent
            or unrecognized
        """
        parsed = Category.parse(category)
        if parsed is None:
            return default
        return self._fns.get(parsed, default)

    def color_name(self, category: Category) -> str | None:
        """Get the configured color name, if the entry was given by name."""
        return self._names.get(category)

    @property
    def categories(self) -> tuple[Category, ...]:
        """Categories with an entry, in priority order."""
        return tuple(c for c in CATEGORY_ORDER if c in self._fns)

    def __contains__(self, category: object) -> bool:
        """Support 'category in scheme' syntax."""
        if not isinstance(category, (str, Category)):
            return False
        parsed = Category.parse(category)
        return parsed is not None and parsed in self._fns

    def __len__(self) -> int:
        """Number of categories with an entry."""
        return len(self._fns)

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{c.value}={self._names.get(c, '<fn>')}" for c in self.categories
        )
        return f"Colorscheme({entries})"


DEFAULT_COLORSCHEME = Colorscheme(
    {
        Category.EXCEPTION: "green",
        Category.REPEAT: "green",
        Category.CONDITIONAL: "green",
        Category.VARIABLE: "blue",
        Category.CORE_FN: "blue",
        Category.DEFINITION: "bright-red",
        Category.READER_CHAR: "red",
        Category.SPECIAL_FORM: "red",
        Category.MACRO: "bright-red",
        Category.NUMBER: "cyan",
        Category.BOOLEAN: "cyan",
        Category.NIL: "cyan",
        Category.S_EXPRESSION: "red",
        Category.KEYWORD: "green",
        Category.COMMENT: "bright-green",
        Category.STRING: "cyan",
        Category.REGEX: "red",
    }
)

# Colorscheme with no entries: every category renders uncolored
NO_COLOR = Colorscheme()


def resolve(override: Colorscheme | Mapping[Category | str, ColorSpec] | None = None) -> Colorscheme:
    """Pick the colorscheme for one highlight call.

    Args:
        override: Replacement colorscheme. Used in full when given;
            categories it omits are uncolored.

    Returns:
        The override, or the colorscheme of the active HighlightConfig
    """
    if override is None:
        from glow.config import get_highlight_config

        return get_highlight_config().colorscheme
    if isinstance(override, Colorscheme):
        return override
    return Colorscheme(override)


def colorize(
    text: str,
    category: Category | str,
    colorscheme: Colorscheme | Mapping[Category | str, ColorSpec] | None = None,
) -> str:
    """Colorize a span with its category's color.

    Unknown categories are a no-op, not an error.
    """
    return resolve(colorscheme).get(category)(text)


__all__ = [
    "DEFAULT_COLORSCHEME",
    "NO_COLOR",
    "ColorSpec",
    "Colorscheme",
    "colorize",
    "resolve",
]
