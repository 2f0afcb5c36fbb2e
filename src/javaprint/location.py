"""Source location tracking for Java syntax tree nodes.

Provides SourceLocation dataclass for the position a node was parsed from.
Only used to make error messages point somewhere useful; rendering never
looks at it.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in its compilation unit.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Path of the compilation unit (optional)

    Examples:
            >>> loc = SourceLocation(3, 5, source_file="Foo.java")
            >>> str(loc)
            'Foo.java:3:5'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "Foo.java:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthetic nodes."""
        return cls(lineno=0, col_offset=0)
