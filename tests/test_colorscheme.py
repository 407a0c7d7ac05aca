"""Tests for colorschemes and span coloring."""

import pytest

from glow import (
    CATEGORY_ORDER,
    DEFAULT_COLORSCHEME,
    NO_COLOR,
    Category,
    Colorscheme,
    HighlightConfig,
    colorize,
    highlight_config_context,
    resolve,
)
from glow.ansi import blue, bright_green, cyan, default, green
from glow.errors import ColorschemeError


class TestDefaultColorscheme:
    def test_covers_every_category(self) -> None:
        assert len(DEFAULT_COLORSCHEME) == len(CATEGORY_ORDER)
        assert DEFAULT_COLORSCHEME.categories == CATEGORY_ORDER

    def test_known_entries(self) -> None:
        assert DEFAULT_COLORSCHEME.get(Category.STRING) is cyan
        assert DEFAULT_COLORSCHEME.get(Category.COMMENT) is bright_green
        assert DEFAULT_COLORSCHEME.get(Category.CORE_FN) is blue
        assert DEFAULT_COLORSCHEME.color_name(Category.DEFINITION) == "bright-red"

    def test_no_color_is_empty(self) -> None:
        assert len(NO_COLOR) == 0
        assert NO_COLOR.get(Category.STRING) is default


class TestColorschemeConstruction:
    def test_names_and_callables(self) -> None:
        scheme = Colorscheme({"string": "green", Category.NUMBER: str.upper})
        assert scheme.get("string") is green
        assert scheme.get(Category.NUMBER)("abc") == "ABC"

    def test_from_dict_keyword_keys(self) -> None:
        scheme = Colorscheme.from_dict({":string": "blue", ":s-exp": "red"})
        assert Category.STRING in scheme
        assert Category.S_EXPRESSION in scheme
        assert len(scheme) == 2

    def test_unknown_category_is_skipped(self) -> None:
        scheme = Colorscheme({"operator": "red", "number": "green"})
        assert len(scheme) == 1
        assert "operator" not in scheme
        assert scheme.get(Category.NUMBER) is green

    def test_unknown_color_raises(self) -> None:
        with pytest.raises(ColorschemeError):
            Colorscheme({"string": "mauve"})

    def test_bad_value_type_raises(self) -> None:
        with pytest.raises(ColorschemeError, match="expected a color name"):
            Colorscheme({"string": 31})  # type: ignore[dict-item]

    def test_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_COLORSCHEME.extra = 1  # type: ignore[attr-defined]

    def test_contains_rejects_non_strings(self) -> None:
        assert 3 not in DEFAULT_COLORSCHEME

    def test_repr_lists_entries(self) -> None:
        assert repr(Colorscheme({"nil": "cyan"})) == "Colorscheme(nil=cyan)"


class TestResolve:
    def test_none_uses_default(self) -> None:
        assert resolve() is DEFAULT_COLORSCHEME

    def test_none_uses_context_config(self) -> None:
        with highlight_config_context(HighlightConfig(colorscheme=NO_COLOR)):
            assert resolve() is NO_COLOR

    def test_colorscheme_passes_through(self) -> None:
        scheme = Colorscheme({"nil": "red"})
        assert resolve(scheme) is scheme

    def test_mapping_replaces_not_merges(self) -> None:
        scheme = resolve({"number": "green"})
        assert scheme.get(Category.NUMBER) is green
        assert scheme.get(Category.STRING) is default

    def test_mapping_with_unknown_category(self) -> None:
        scheme = resolve({"operator": "red", "number": "green"})
        assert scheme.get(Category.NUMBER) is green
        assert scheme.categories == (Category.NUMBER,)


class TestColorize:
    def test_default_colorscheme(self) -> None:
        assert colorize("42", Category.NUMBER) == "\x1b[36m42\x1b[0m"

    def test_by_tag(self) -> None:
        assert colorize("42", "number") == cyan("42")

    def test_unknown_category_is_identity(self) -> None:
        assert colorize("42", "not-a-category") == "42"

    def test_absent_from_override_is_identity(self) -> None:
        assert colorize('"s"', Category.STRING, {"number": "green"}) == '"s"'
