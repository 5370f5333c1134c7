"""Pull-based lexer over a single source string.

The lexer never runs ahead of the parser: the parser asks for one token at a
time with ``peek``/``consume``/``next``, and reads unstructured runs (text
between tags, attribute values) with ``text_till``.

The only state is an integer cursor into the immutable source. It never moves
backwards, so the slices handed out never overlap and follow document order.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from tagtree.errors import UnknownLexeme
from tagtree.location import SourceLocation
from tagtree.tokens import Token, TokenType

# Single-character punctuation. "<" is handled separately because of "</".
_PUNCTUATION: dict[str, TokenType] = {
    ">": TokenType.TAG_END,
    '"': TokenType.QUOTE,
    "=": TokenType.EQUALS,
}


class Lexer:
    """Cursor-based lexer with one token of lookahead.

    Usage:
            >>> lexer = Lexer('<a href="x">')
            >>> [token.type.name for token in lexer.tokenize()]
        ['OPEN_TAG_START', 'IDENTIFIER', 'IDENTIFIER', 'EQUALS', 'QUOTE',
         'IDENTIFIER', 'QUOTE', 'TAG_END', 'EOF']

    ``peek`` skips leading whitespace as a side effect (the cursor moves past
    it for good) but leaves the token itself in place, so repeated peeks
    return the same kind.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file

    @property
    def position(self) -> int:
        """Current cursor offset into the source."""
        return self._pos

    def location(self, offset: int | None = None) -> SourceLocation:
        """Source location of ``offset`` (the cursor by default)."""
        return SourceLocation.from_offset(
            self._source,
            self._pos if offset is None else offset,
            self._source_file,
        )

    # =========================================================================
    # Token access
    # =========================================================================

    def peek(self) -> Token:
        """Classify the next token without consuming it.

        Identifiers are returned with an empty value; ``consume`` computes
        the actual text.

        Raises:
            UnknownLexeme: The next non-whitespace character starts no token.
        """
        self._skip_whitespace()
        pos = self._pos
        if pos >= self._source_len:
            return Token(TokenType.EOF, "", pos)

        char = self._source[pos]
        if char == "<":
            if self._source.startswith("/", pos + 1):
                return Token(TokenType.CLOSE_TAG_START, "", pos)
            return Token(TokenType.OPEN_TAG_START, "", pos)

        token_type = _PUNCTUATION.get(char)
        if token_type is not None:
            return Token(token_type, "", pos)
        if char.isalpha():
            return Token(TokenType.IDENTIFIER, "", pos)

        raise UnknownLexeme(self.remainder(), self.location(pos))

    def consume(self, token: Token) -> Token:
        """Advance past ``token`` and return it fully realized.

        ``token`` is normally the result of ``peek``; only its type is used.
        Identifiers take the maximal alphanumeric run at the cursor.

        Args:
            token: Token whose kind decides how far to advance

        Returns:
            The consumed token, carrying its text and offset
        """
        start = self._pos
        match token.type:
            case TokenType.EOF:
                pass
            case TokenType.IDENTIFIER:
                return Token(TokenType.IDENTIFIER, self._take_identifier(), start)
            case TokenType.CLOSE_TAG_START:
                self._cut_front(2)
            case _:
                self._cut_front(1)
        return Token(token.type, "", start)

    def next(self) -> Token:
        """Peek and consume the next token.

        Raises:
            UnknownLexeme: The next non-whitespace character starts no token.
        """
        return self.consume(self.peek())

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF.

        Only meaningful for tag-only input: text runs are not tokens, so
        running text containing punctuation raises UnknownLexeme.

        Yields:
            Token objects one at a time
        """
        while True:
            token = self.next()
            yield token
            if token.type is TokenType.EOF:
                return

    # =========================================================================
    # Raw text access
    # =========================================================================

    def text_till(self, delimiter: str) -> str:
        """Read raw text up to ``delimiter`` (or end of input).

        Leading whitespace is skipped and trailing whitespace is trimmed from
        the result. The delimiter itself is left for the next token.

        Args:
            delimiter: Single character that ends the run

        Returns:
            The trimmed run, possibly empty
        """
        self._skip_whitespace()
        end = self._source.find(delimiter, self._pos)
        if end == -1:
            end = self._source_len
        return self._cut_front(end - self._pos).rstrip()

    def remainder(self) -> str:
        """Return the unconsumed source. No side effects."""
        return self._source[self._pos :]

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        source = self._source
        pos = self._pos
        source_len = self._source_len  # Local var for faster access
        while pos < source_len and source[pos].isspace():
            pos += 1
        self._pos = pos

    def _take_identifier(self) -> str:
        source = self._source
        end = self._pos
        while end < self._source_len and source[end].isalnum():
            end += 1
        return self._cut_front(end - self._pos)

    def _cut_front(self, n: int) -> str:
        """Consume the next ``n`` characters (clamped at EOF) and return them."""
        start = self._pos
        end = min(start + n, self._source_len)
        self._pos = end
        return self._source[start:end]
