"""StringBuilder for O(n) string accumulation.

The highlighter emits many small pieces (colored spans and the verbatim
text between them). Appending to a list and joining once at the end keeps
output assembly linear in the number of pieces.

Thread Safety:
StringBuilder instances are local to each highlight() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.
    
    Appends to a list, joins once at the end.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("(")
            >>> sb.append("defn")
            >>> sb.append(")")
            >>> sb.build()
            '(defn)'
    
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
