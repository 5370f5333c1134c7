"""Recursive descent parser producing an immutable DOM tree.

Pulls tokens from the Lexer one at a time and builds Node objects. Each
grammar rule is one method:

    document  := node
    nodes     := node*            (until "</" or EOF)
    node      := element | text-run
    element   := "<" IDENT attribute* ">" nodes "</" IDENT ">"
    attribute := IDENT ["=" '"' attr-text '"']
    text-run  := raw text up to the next "<" or EOF

There is no error recovery. The first error raised aborts the parse and no
partial tree is returned.

Thread Safety:
- Parser instances are single-use and not thread-safe
- Configuration is read from ContextVar (thread-local)
- The resulting tree is immutable and safe to share across threads

"""

from __future__ import annotations

from tagtree.config import ParseConfig, get_parse_config
from tagtree.errors import (
    LexemeError,
    LexerError,
    NestingTooDeep,
    ParseError,
    TagMismatch,
    UnexpectedToken,
    UnknownLexeme,
)
from tagtree.lexer import Lexer
from tagtree.nodes import AttrMap, Element, Node, elem, text
from tagtree.tokens import Token, TokenType
from tagtree.utils.logger import get_logger

logger = get_logger(__name__)

_NODES_END = frozenset({TokenType.CLOSE_TAG_START, TokenType.EOF})
_ATTRIBUTES_END = frozenset({TokenType.TAG_END, TokenType.EOF})


class Parser:
    """Recursive descent parser for tagtree markup.

    Usage:
            >>> Parser("<p>hi</p>").parse()
        Element(tag_name='p', attributes=mappingproxy({}), children=(Text(content='hi'),))

    Recursion depth follows element nesting and is capped by
    ``ParseConfig.max_depth``.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lexer",
        "_depth",
        "_max_depth",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_file = source_file
        self._lexer = Lexer(source, source_file)
        self._depth = 0
        self._max_depth: int | None = None

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> Node:
        """Parse the source into a single root node.

        Returns:
            The root Node (an Element for any document that starts with a tag)

        Raises:
            ParseError: On the first lexical, grammatical or tag-balance error
        """
        self._lexer = Lexer(self._source, self._source_file)
        self._depth = 0
        self._max_depth = self._config.max_depth

        logger.debug(
            "parsing %d chars from %s", len(self._source), self._source_file or "<string>"
        )
        try:
            root = self._node()
        except ParseError as e:
            logger.debug("parse failed: %s", e)
            raise
        logger.debug("parse finished at offset %d", self._lexer.position)
        return root

    # =========================================================================
    # Grammar rules
    # =========================================================================

    def _nodes(self) -> tuple[Node, ...]:
        children: list[Node] = []
        while True:
            token = self._peek_lenient()
            if token is not None and token.type in _NODES_END:
                break
            children.append(self._node())
        return tuple(children)

    def _node(self) -> Node:
        token = self._peek_lenient()
        if token is not None and token.type is TokenType.OPEN_TAG_START:
            return self._element()
        # Anything that is not a tag opener, an unknown lexeme included, is text
        return text(self._lexer.text_till("<"))

    def _element(self) -> Element:
        self._enter()
        self._expect(TokenType.OPEN_TAG_START)
        tag_name = self._expect_identifier().value
        attributes = self._attributes()
        self._expect(TokenType.TAG_END)

        children = self._nodes()

        self._expect(TokenType.CLOSE_TAG_START)
        close_tag = self._expect_identifier()
        self._expect(TokenType.TAG_END)
        self._depth -= 1

        if tag_name != close_tag.value:
            raise TagMismatch(tag_name, close_tag.value, self._lexer.location(close_tag.offset))
        return elem(tag_name, attributes, children)

    def _attributes(self) -> AttrMap:
        attrs: dict[str, str] = {}
        while self._peek().type not in _ATTRIBUTES_END:
            name, value = self._attribute()
            attrs[name] = value
        return attrs

    def _attribute(self) -> tuple[str, str]:
        name = self._expect_identifier().value
        if self._peek().type is not TokenType.EQUALS:
            return name, ""

        self._expect(TokenType.EQUALS)
        self._expect(TokenType.QUOTE)
        value = self._lexer.text_till('"')
        self._expect(TokenType.QUOTE)
        return name, value

    # =========================================================================
    # Token helpers
    # =========================================================================

    def _enter(self) -> None:
        self._depth += 1
        if self._max_depth is not None and self._depth > self._max_depth:
            raise NestingTooDeep(self._depth, self._max_depth, self._lexer.location())

    def _expect(self, expected: TokenType) -> Token:
        """Read the next token and check its kind against ``expected``."""
        src = self._lexer.remainder()
        got = self._next_token()
        if got.type is not expected:
            raise UnexpectedToken(expected, got, src, self._lexer.location(got.offset))
        return got

    def _expect_identifier(self) -> Token:
        return self._expect(TokenType.IDENTIFIER)

    def _next_token(self) -> Token:
        try:
            return self._lexer.next()
        except LexerError as e:
            raise LexemeError(e) from e

    def _peek(self) -> Token:
        try:
            return self._lexer.peek()
        except LexerError as e:
            raise LexemeError(e) from e

    def _peek_lenient(self) -> Token | None:
        """Peek, reporting an unknown lexeme as None instead of raising."""
        try:
            return self._lexer.peek()
        except UnknownLexeme:
            return None
