"""
tagtree: a small markup parser producing an immutable DOM tree.

Parses an HTML-like subset (tags, quoted attributes, text, nesting) with a
pull-based lexer and a recursive descent parser. Open and close tag names
must match; every error is fatal.

Quick Start:
    >>> from tagtree import parse
    >>> tree = parse('<p class="lead">Hello <em>world</em></p>')
    >>> tree.tag_name, dict(tree.attributes)
    ('p', {'class': 'lead'})
    >>> [type(child).__name__ for child in tree.children]
    ['Text', 'Element']

Errors:
    >>> from tagtree import ParseError, TagMismatch
    >>> try:
    ...     parse("<a></b>")
    ... except TagMismatch as e:
    ...     (e.opened, e.closed)
    ('a', 'b')

Installation:
    pip install tagtree              # Zero runtime dependencies
"""

from tagtree.config import (
    DEFAULT_MAX_DEPTH,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tagtree.errors import (
    LexemeError,
    LexerError,
    NestingTooDeep,
    ParseError,
    TagMismatch,
    TagTreeError,
    UnexpectedToken,
    UnknownLexeme,
)
from tagtree.lexer import Lexer
from tagtree.location import SourceLocation
from tagtree.nodes import AttrMap, Element, Node, Text, elem, text
from tagtree.parser import Parser
from tagtree.tokens import Token, TokenType
from tagtree.visitor import BaseVisitor, transform, walk

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Node:
    """Parse markup source into a DOM tree.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages
        config: Configuration for this call only; defaults to the active
            context configuration

    Returns:
        The root Node

    Raises:
        ParseError: On the first lexical, grammatical or tag-balance error

    Example:
        >>> parse("<html><body></body></html>").children[0].tag_name
        'body'
    """
    if config is None:
        return Parser(source, source_file).parse()
    with parse_config_context(config):
        return Parser(source, source_file).parse()


__all__ = [
    # Main API
    "parse",
    "Parser",
    "Lexer",
    # Configuration
    "DEFAULT_MAX_DEPTH",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Nodes
    "AttrMap",
    "Node",
    "Text",
    "Element",
    "text",
    "elem",
    # Tokens
    "Token",
    "TokenType",
    # Errors
    "TagTreeError",
    "LexerError",
    "UnknownLexeme",
    "ParseError",
    "LexemeError",
    "UnexpectedToken",
    "TagMismatch",
    "NestingTooDeep",
    # Location
    "SourceLocation",
    # Tree utilities
    "BaseVisitor",
    "walk",
    "transform",
]
