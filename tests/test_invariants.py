"""Property-based tests for highlighter invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from glow import CATEGORY_ORDER, NO_COLOR, highlight, strip_colors

OPEN = "\ue000"
CLOSE = "\ue001"

# Characters that exercise every category's pattern
CLOJURE_ALPHABET = "()[]{}\"\\;:#'@~^`*-+/.!?<>=_ \n\tabcdefilnortuxy0123456789"

clojure_text = st.text(alphabet=CLOJURE_ALPHABET, max_size=200)
any_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\x1b"),
    max_size=300,
)

MARKED = {c: (lambda s: f"{OPEN}{s}{CLOSE}") for c in CATEGORY_ORDER}


class TestStructurePreservation:
    @given(any_text)
    @settings(max_examples=200)
    def test_stripping_colors_restores_source(self, source: str) -> None:
        """Coloring never inserts, deletes or reorders source characters."""
        assert strip_colors(highlight(source)) == source

    @given(clojure_text)
    @settings(max_examples=200)
    def test_stripping_colors_restores_clojure_source(self, source: str) -> None:
        assert strip_colors(highlight(source)) == source

    @given(any_text)
    @settings(max_examples=100)
    def test_no_color_is_identity(self, source: str) -> None:
        assert highlight(source, NO_COLOR) == source

    @given(st.text(alphabet=" \t\n\r", max_size=50))
    def test_whitespace_is_identity(self, source: str) -> None:
        assert highlight(source) == source


class TestAtomicClaims:
    @given(clojure_text)
    @settings(max_examples=200)
    def test_spans_never_nest(self, source: str) -> None:
        """A claimed span never contains another category's span."""
        depth = 0
        for char in highlight(source, MARKED):
            if char == OPEN:
                depth += 1
                assert depth == 1, "nested span"
            elif char == CLOSE:
                depth -= 1
                assert depth == 0
        assert depth == 0

    @given(clojure_text)
    @settings(max_examples=100)
    def test_spans_are_never_empty(self, source: str) -> None:
        assert f"{OPEN}{CLOSE}" not in highlight(source, MARKED)

    @given(clojure_text)
    @settings(max_examples=100)
    def test_markers_removed_restore_source(self, source: str) -> None:
        out = highlight(source, MARKED)
        assert out.replace(OPEN, "").replace(CLOSE, "") == source


class TestDeterminism:
    @given(clojure_text)
    @settings(max_examples=50)
    def test_repeated_highlight_identical(self, source: str) -> None:
        assert highlight(source) == highlight(source)
