"""Source location tracking for error messages.

Tokens only record a character offset. SourceLocation turns an offset into
the line and column a human wants to see, and is computed only when an error
is actually raised.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1);
    ``offset`` is the 0-indexed position in the source string.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute position in the source string
        source_file: Source file path (optional)

    Examples:
            >>> SourceLocation.from_offset("<a>\\n  <b>", 6)
        SourceLocation(lineno=2, col_offset=3, offset=6, source_file=None)

            >>> loc = SourceLocation(1, 5, 4, "page.html")
            >>> str(loc)
            'page.html:1:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "page.html:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls,
        source: str,
        offset: int,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Compute line and column for a position in ``source``.

        Offsets past the end of the source are clamped to its length, which
        is where EOF is reported.

        Args:
            source: The full source text
            offset: 0-indexed position in ``source``
            source_file: Optional path, carried through for messages

        Returns:
            SourceLocation for ``offset``
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for errors built outside a parse."""
        return cls(lineno=0, col_offset=0)
