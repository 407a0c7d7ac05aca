"""Regex matcher provider for Clojure source.

One compiled pattern per category. Each pattern answers a single question:
where is the leftmost span of this category in a fragment? The highlighter
decides what happens with the answer.

Symbol-shaped categories (nil, numbers, the name tables) only match between
symbol boundaries, so ``nil`` is found in ``(nil? nil)`` once, not twice,
and ``map`` is not found inside ``mapv``.

Name tables are disjoint: a name belongs to exactly one of the macro,
special-form, definition, core-fn, conditional, repeat or exception tables.
Which table a name lives in decides its color, since the chain claims
categories in priority order.

Thread Safety:
RegexMatcher is immutable after creation and compiled patterns are safe to
share. DEFAULT_MATCHER is a module-level singleton.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from glow.categories import Category
from glow.errors import PatternError

# Characters that may continue a symbol
_SYMBOL_CHARS = r"\w*+!\-?<>=/.'&%$#:|"
# Characters that, when they precede a token, mean it is part of a bigger symbol.
# Reader prefixes (' # @ ~ ^ `) are excluded so 'nil and @state still match.
_SYMBOL_BODY = r"\w*+!\-?<>=/.&%$:|"

_BEFORE = rf"(?<![{_SYMBOL_BODY}])"
_AFTER = rf"(?![{_SYMBOL_CHARS}])"


def _names(words: str) -> frozenset[str]:
    return frozenset(words.split())


MACROS: frozenset[str] = _names(
    """
    -> ->> .. as-> some-> some->> amap areduce assert binding bound-fn
    comment delay doto dosync future gen-class gen-interface import io!
    lazy-cat lazy-seq locking memfn proxy refer-clojure reify sync time
    with-bindings with-in-str with-local-vars with-open with-out-str
    with-precision with-redefs extend-protocol extend-type vswap! pvalues
    letfn macroexpand-1 macroexpand
    """
)

SPECIAL_FORMS: frozenset[str] = _names(
    """
    quote var do let fn new set! . monitor-enter monitor-exit
    fn* let* loop* letfn* case* import* reify* deftype*
    """
)

DEFINITIONS: frozenset[str] = _names(
    """
    def defn defn- defmacro defmulti defmethod defonce defprotocol
    defrecord deftype defstruct definterface definline declare ns
    """
)

CORE_FNS: frozenset[str] = _names(
    """
    + - * / = == not= < > <= >= inc dec max min rem mod quot
    not identity comp partial juxt complement constantly apply
    map mapv mapcat filter filterv remove reduce reduce-kv keep
    first second rest next last butlast nth nthrest take drop take-while
    drop-while take-last drop-last partition partition-by partition-all
    group-by frequencies sort sort-by reverse distinct interleave interpose
    count seq vec vector list list* hash-map hash-set sorted-map sorted-set
    set keys vals get get-in assoc assoc-in dissoc update update-in
    merge merge-with select-keys zipmap into conj cons concat empty
    range repeat repeatedly iterate cycle doall dorun
    some every? not-any? not-every? empty? contains? find
    nil? some? true? false? zero? pos? neg? even? odd?
    number? integer? string? keyword? symbol? map? vector? seq? coll? fn?
    str subs name namespace keyword symbol gensym format
    print println pr prn printf newline flush
    atom swap! reset! deref ref ref-set alter commute agent send send-off
    meta with-meta vary-meta
    slurp spit read-string
    re-find re-matches re-seq re-pattern
    ex-info ex-data ex-message
    """
)

CONDITIONALS: frozenset[str] = _names(
    """
    if if-not if-let if-some when when-not when-let when-some when-first
    cond condp cond-> cond->> case and or
    """
)

REPEATS: frozenset[str] = _names("loop recur doseq dotimes while for")

EXCEPTIONS: frozenset[str] = _names("try catch finally throw")


def name_pattern(names: Iterable[str]) -> str:
    """Build a symbol-bounded alternation of literal names.

    Longer names come first so ``defn-`` wins over ``defn`` and ``->>``
    over ``->``.
    """
    ordered = sorted(names, key=lambda n: (-len(n), n))
    alternation = "|".join(re.escape(n) for n in ordered)
    return rf"{_BEFORE}(?:{alternation}){_AFTER}"


_NUMBER = (
    r"[-+]?(?:"
    r"0[xX][0-9a-fA-F]+N?"  # hex
    r"|\d+[rR][0-9a-zA-Z]+"  # radix
    r"|\d+/\d+"  # ratio
    r"|\d+(?:\.\d*)?(?:[eE][-+]?\d+)?[NM]?"
    r")"
)

CLOJURE_PATTERNS: Mapping[Category, str] = MappingProxyType(
    {
        Category.REGEX: r'#"(?:[^"\\]|\\.)*"',
        Category.STRING: r'(?<!\\)"(?:[^"\\]|\\.)*"',
        Category.COMMENT: r"(?<!\\)(?:;|#!).*",
        Category.KEYWORD: rf"{_BEFORE}::?[{_SYMBOL_CHARS}]+",
        Category.S_EXPRESSION: r"[()\[\]{}]",
        Category.NIL: rf"{_BEFORE}nil{_AFTER}",
        Category.BOOLEAN: rf"{_BEFORE}(?:true|false){_AFTER}",
        Category.NUMBER: rf"{_BEFORE}{_NUMBER}{_AFTER}",
        Category.MACRO: name_pattern(MACROS),
        Category.SPECIAL_FORM: name_pattern(SPECIAL_FORMS),
        Category.READER_CHAR: r"#\?@|#[_'?=:^]|#|~@|(?<![\w*+!\-?<>=/.&%$|])'|[`~@^]",
        Category.DEFINITION: name_pattern(DEFINITIONS),
        Category.CORE_FN: name_pattern(CORE_FNS),
        Category.VARIABLE: rf"{_BEFORE}(?:\*[\w\-!?+<>=.:/]+\*|\*[123e]){_AFTER}",
        Category.CONDITIONAL: name_pattern(CONDITIONALS),
        Category.REPEAT: name_pattern(REPEATS),
        Category.EXCEPTION: name_pattern(EXCEPTIONS),
    }
)

# Escaped newlines inside string literals need DOTALL
_DOTALL = frozenset({Category.REGEX, Category.STRING})


def _compile(category: Category, pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        try:
            compiled = re.compile(pattern, re.DOTALL if category in _DOTALL else 0)
        except re.error as e:
            raise PatternError(category.value, f"invalid regex: {e}") from e
    if compiled.match("") is not None:
        raise PatternError(category.value, "pattern matches the empty string")
    return compiled


class RegexMatcher:
    """Matcher provider backed by one compiled regex per category.

    Categories without a pattern never match.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Mapping[Category | str, str | re.Pattern[str]]) -> None:
        """Compile a pattern table.

        Raises:
            PatternError: For an unknown category, an invalid regex, or a
                pattern that can match the empty string
        """
        compiled: dict[Category, re.Pattern[str]] = {}
        for key, pattern in patterns.items():
            category = Category.parse(key)
            if category is None:
                raise PatternError(str(key), "unknown category")
            compiled[category] = _compile(category, pattern)
        self._patterns = MappingProxyType(compiled)

    def find(self, category: Category, text: str) -> tuple[int, int] | None:
        """Find the leftmost occurrence of a category in text."""
        pattern = self._patterns.get(category)
        if pattern is None:
            return None
        m = pattern.search(text)
        if m is None:
            return None
        return m.span()

    def pattern(self, category: Category) -> re.Pattern[str] | None:
        """Get the compiled pattern for a category."""
        return self._patterns.get(category)

    def with_patterns(
        self, overrides: Mapping[Category | str, str | re.Pattern[str]]
    ) -> RegexMatcher:
        """Return a new matcher with some patterns replaced."""
        merged: dict[Category | str, str | re.Pattern[str]] = dict(self._patterns)
        merged.update(overrides)
        return RegexMatcher(merged)

    def __contains__(self, category: object) -> bool:
        return category in self._patterns


DEFAULT_MATCHER = RegexMatcher(CLOJURE_PATTERNS)


def find(category: Category | str, text: str) -> tuple[int, int] | None:
    """Find a category in text using the default Clojure patterns.

    Unknown category names never match.
    """
    parsed = Category.parse(category)
    if parsed is None:
        return None
    return DEFAULT_MATCHER.find(parsed, text)


__all__ = [
    "CLOJURE_PATTERNS",
    "CONDITIONALS",
    "CORE_FNS",
    "DEFAULT_MATCHER",
    "DEFINITIONS",
    "EXCEPTIONS",
    "MACROS",
    "REPEATS",
    "SPECIAL_FORMS",
    "RegexMatcher",
    "find",
    "name_pattern",
]
