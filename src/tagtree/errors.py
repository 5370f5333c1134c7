"""Exception classes for tagtree.

Every failure is fatal: the parser raises the first error it meets and
produces no partial tree. Callers of :func:`tagtree.parse` only need to
catch :class:`ParseError`; lexer failures are re-raised as
:class:`LexemeError` at the parser boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagtree.location import SourceLocation
    from tagtree.tokens import Token, TokenType


def _preview(src: str, limit: int = 20) -> str:
    if len(src) > limit:
        return repr(src[: limit - 3] + "...")
    return repr(src)


class TagTreeError(Exception):
    """Base exception for all tagtree errors.

    Subclass this for specific error categories.
    """

    pass


class LexerError(TagTreeError):
    """Error raised by the lexer.

    Attributes:
        remainder: The unconsumed source at the point of failure
        location: Where the lexer stopped, if known
    """

    def __init__(
        self,
        message: str,
        remainder: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.message = message
        self.remainder = remainder
        self.location = location
        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")

    @property
    def offset(self) -> int | None:
        """Cursor offset of the failure, if a location was recorded."""
        return self.location.offset if self.location is not None else None


class UnknownLexeme(LexerError):
    """The next non-whitespace character cannot start any token."""

    def __init__(self, remainder: str, location: SourceLocation | None = None) -> None:
        super().__init__(f"unknown lexeme at {_preview(remainder)}", remainder, location)


class ParseError(TagTreeError):
    """Error during markup parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def _located(cls, location: SourceLocation | None) -> dict[str, int | str | None]:
        if location is None:
            return {}
        return {
            "lineno": location.lineno,
            "col_offset": location.col_offset,
            "source_file": location.source_file,
        }


class LexemeError(ParseError):
    """A lexer failure surfaced through the parser.

    The original :class:`LexerError` is kept as ``lexer_error`` and is also
    the exception's ``__cause__``.
    """

    def __init__(self, lexer_error: LexerError) -> None:
        self.lexer_error = lexer_error
        super().__init__(lexer_error.message, **self._located(lexer_error.location))

    @property
    def remainder(self) -> str:
        return self.lexer_error.remainder


class UnexpectedToken(ParseError):
    """The grammar required one token kind and the lexer produced another.

    Attributes:
        expected: The token kind the grammar required
        got: The token actually read
        src: The unconsumed source just before ``got`` was read
    """

    def __init__(
        self,
        expected: TokenType,
        got: Token,
        src: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.expected = expected
        self.got = got
        self.src = src
        super().__init__(
            f"expected {expected.name}, got {got.type.name} at {_preview(src)}",
            **self._located(location),
        )


class TagMismatch(ParseError):
    """A closing tag name does not match its opening tag name."""

    def __init__(
        self,
        opened: str,
        closed: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.opened = opened
        self.closed = closed
        super().__init__(
            f"closing tag </{closed}> does not match <{opened}>",
            **self._located(location),
        )


class NestingTooDeep(ParseError):
    """Element nesting exceeded ``ParseConfig.max_depth``."""

    def __init__(
        self,
        depth: int,
        limit: int,
        location: SourceLocation | None = None,
    ) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"element nesting depth {depth} exceeds limit of {limit}",
            **self._located(location),
        )
