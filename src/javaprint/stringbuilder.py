"""StringBuilder for rendering a node into one output string.

The type renderer threads a single builder through its recursion and joins
once at the top level, instead of concatenating partial strings at each
level of nesting.

Thread Safety:
StringBuilder instances are local to each rendering call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("int").append_repeated("[]", 2)
            >>> sb.build()
            'int[][]'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
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

    def append_repeated(self, s: str, count: int) -> StringBuilder:
        """Append ``s`` ``count`` times. Non-positive counts append nothing."""
        if s and count > 0:
            self._parts.append(s * count)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
