"""Precedence chain highlighter.

Claims spans of Clojure source category by category, in CATEGORY_ORDER.
For a fragment at category i:

- If category i matches, split around the leftmost match at its exact
  offsets. The match is colored and never looked at again. The text before
  and after it is processed at category i again, since each half may hold
  further occurrences.
- If category i does not match, move the same fragment on to category i+1.
  A fragment without category i cannot gain one by being split further, so
  the chain never moves back to an earlier category.
- A fragment with no match at the last category is emitted verbatim.

The result equals the input with some spans wrapped in color codes. An
earlier category owns the whole of any span it claims, so a number inside
a keyword or a comment marker inside a string is never colored on its own.

The chain runs on an explicit work-list instead of native recursion, so
inputs with many small matches cannot exhaust the stack.

Thread Safety:
highlight() keeps all state in local variables. The colorscheme override
is passed down explicitly, never stored globally.

"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

from glow.categories import CATEGORY_ORDER, Category
from glow.colorscheme import ColorSpec, Colorscheme, resolve
from glow.config import HighlightConfig, get_highlight_config
from glow.profiling import get_highlight_accumulator
from glow.protocols import MatcherProvider
from glow.stringbuilder import StringBuilder
from glow.utils.logger import get_logger

logger = get_logger(__name__)

_LAST = len(CATEGORY_ORDER) - 1

# Work-list marker: the item is already colored output
_EMIT = -1


def split_at(text: str, start: int, end: int) -> tuple[str, str, str]:
    """Split text around the span [start, end).

    Splitting by offset keeps the split unambiguous when the matched text
    also occurs elsewhere in the fragment.

    Returns:
        (pre, match, post)
    """
    return text[:start], text[start:end], text[end:]


def _find(matcher: MatcherProvider, category: Category, text: str) -> tuple[int, int] | None:
    span = matcher.find(category, text)
    if span is None:
        return None
    start, end = span
    if not 0 <= start < end <= len(text):
        # Spans must be non-empty and lie inside the fragment
        logger.debug(
            "Ignoring %s match %r in fragment of length %d",
            category.value,
            span,
            len(text),
        )
        return None
    return span


def highlight(
    source: str,
    colorscheme: Colorscheme | Mapping[Category | str, ColorSpec] | None = None,
    *,
    matcher: MatcherProvider | None = None,
    config: HighlightConfig | None = None,
) -> str:
    """Highlight Clojure source with terminal colors.

    Args:
        source: Clojure source text (any string, including "")
        colorscheme: Replacement colorscheme for this call. Used in full:
            categories it omits are left uncolored, not colored by the
            default colorscheme.
        matcher: Matcher provider to use instead of the configured one
        config: Config to use instead of the context's HighlightConfig

    Returns:
        source with each claimed span wrapped by its category's color

    Example:
        >>> highlight("(+ 1 2)", {"number": "cyan"})
        '(+ \\x1b[36m1\\x1b[0m \\x1b[36m2\\x1b[0m)'
    """
    cfg = config if config is not None else get_highlight_config()
    scheme = cfg.colorscheme if colorscheme is None else resolve(colorscheme)
    find_in = matcher if matcher is not None else cfg.matcher
    max_matches = cfg.max_matches

    colors = tuple(scheme.get(category) for category in CATEGORY_ORDER)
    acc = get_highlight_accumulator()
    counts: Counter[Category] | None = Counter() if acc is not None else None

    out = StringBuilder()
    # LIFO: push post, colored match, pre so they come off in source order
    work: list[tuple[str, int]] = [(source, 0)]
    claimed = 0
    steps = 0
    truncated = False

    while work:
        text, index = work.pop()
        if index == _EMIT or not text:
            out.append(text)
            continue
        if max_matches is not None and claimed >= max_matches:
            if not truncated:
                truncated = True
                logger.warning(
                    "Reached max_matches=%d; leaving the rest of the input uncolored",
                    max_matches,
                )
            out.append(text)
            continue

        span = None
        while True:
            steps += 1
            span = _find(find_in, CATEGORY_ORDER[index], text)
            if span is not None or index == _LAST:
                break
            index += 1

        if span is None:
            out.append(text)
            continue

        pre, match, post = split_at(text, *span)
        claimed += 1
        if counts is not None:
            counts[CATEGORY_ORDER[index]] += 1
        work.append((post, index))
        work.append((colors[index](match), _EMIT))
        work.append((pre, index))

    logger.debug(
        "Highlighted %d chars: %d spans claimed in %d steps",
        len(source),
        claimed,
        steps,
    )
    if acc is not None and counts is not None:
        acc.record_highlight(len(source), counts, steps, truncated=truncated)
    return out.build()


__all__ = [
    "highlight",
    "split_at",
]
