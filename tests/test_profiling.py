"""Tests for glow.profiling — highlight profiling API."""

from glow import Category, HighlightConfig, highlight
from glow.profiling import (
    HighlightAccumulator,
    get_highlight_accumulator,
    profiled_highlight,
)


class TestGetHighlightAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_highlight_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_highlight():
            pass
        assert get_highlight_accumulator() is None


class TestProfiledHighlight:
    def test_yields_accumulator(self) -> None:
        with profiled_highlight() as acc:
            assert isinstance(acc, HighlightAccumulator)
            assert get_highlight_accumulator() is acc

    def test_records_highlight_call(self) -> None:
        with profiled_highlight() as acc:
            highlight("(inc 1)")
        assert acc.highlight_calls == 1
        assert acc.source_length == len("(inc 1)")
        assert acc.matches[Category.S_EXPRESSION] == 2
        assert acc.matches[Category.NUMBER] == 1
        assert acc.matches[Category.CORE_FN] == 1
        assert acc.total_matches == 4
        assert acc.fragments > 0

    def test_records_multiple_calls(self) -> None:
        with profiled_highlight() as acc:
            highlight("nil")
            highlight("true")
            highlight("")
        assert acc.highlight_calls == 3
        assert acc.matches[Category.NIL] == 1
        assert acc.matches[Category.BOOLEAN] == 1

    def test_records_truncation(self) -> None:
        with profiled_highlight() as acc:
            highlight("1 2 3", config=HighlightConfig(max_matches=1))
        assert acc.truncated_calls == 1
        assert acc.total_matches == 1


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = HighlightAccumulator().summary()
        assert summary["highlight_calls"] == 0
        assert summary["source_length"] == 0
        assert summary["matches"] == 0
        assert summary["by_category"] == {}

    def test_summary_after_highlight(self) -> None:
        with profiled_highlight() as acc:
            highlight(';; hi\n"x"')
        summary = acc.summary()
        assert summary["by_category"] == {"string": 1, "comment": 1}
        assert summary["total_ms"] >= 0
