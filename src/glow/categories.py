"""Lexical categories and their fixed priority order.

The highlighter claims spans category by category, in the order given by
CATEGORY_ORDER. Earlier categories win any text they overlap with a later
category.

Thread Safety:
Category is an enum and CATEGORY_ORDER is a tuple. Both are immutable.

"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Lexical categories of Clojure source.

    Members are declared in priority order (highest first). The value is
    the tag used in colorscheme config, e.g. ``"special-form"``.

    """

    REGEX = "regex"
    STRING = "string"
    COMMENT = "comment"
    KEYWORD = "keyword"
    S_EXPRESSION = "s-expression"
    NIL = "nil"
    BOOLEAN = "boolean"
    NUMBER = "number"
    MACRO = "macro"
    SPECIAL_FORM = "special-form"
    READER_CHAR = "reader-char"
    DEFINITION = "definition"
    CORE_FN = "core-fn"
    VARIABLE = "variable"
    CONDITIONAL = "conditional"
    REPEAT = "repeat"
    EXCEPTION = "exception"

    @classmethod
    def parse(cls, name: str | Category) -> Category | None:
        """Look up a category by tag, member name, or keyword spelling.

        Accepts ``"special-form"``, ``"SPECIAL_FORM"``, ``":special-form"``
        and the short alias ``"s-exp"``.

        Returns:
            The Category, or None if the name is not recognized
        """
        if isinstance(name, Category):
            return name
        if not isinstance(name, str):
            return None
        key = name.strip().lstrip(":").lower().replace("_", "-")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_ALIASES = {
    "s-exp": "s-expression",
    "sexp": "s-expression",
    "special": "special-form",
}

# Enum iteration order is declaration order, which is the priority order.
CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)


__all__ = [
    "CATEGORY_ORDER",
    "Category",
]
