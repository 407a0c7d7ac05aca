"""Shared fixtures for Glow tests."""

from collections.abc import Callable

import pytest

from glow import Category, reset_highlight_config


def _tag(category: Category) -> Callable[[str], str]:
    return lambda s: f"<{category.value}>{s}</>"


@pytest.fixture
def tagged() -> Callable[..., dict[Category, Callable[[str], str]]]:
    """Build a colorscheme that wraps spans in readable tags.

    tagged("number", "string") tags only those categories; tagged() tags all.
    """

    def make(*names: str) -> dict[Category, Callable[[str], str]]:
        categories = [Category(n) for n in names] if names else list(Category)
        return {c: _tag(c) for c in categories}

    return make


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_highlight_config()
