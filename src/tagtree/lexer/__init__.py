"""Lexer for tagtree markup.

lexer/
├── __init__.py          # Re-exports Lexer
└── core.py              # Lexer class (cursor, token access, raw text runs)

Usage:
    >>> from tagtree.lexer import Lexer
    >>> lexer = Lexer("<p></p>")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(OPEN_TAG_START)
Token(IDENTIFIER, 'p')
Token(TAG_END)
Token(CLOSE_TAG_START)
Token(IDENTIFIER, 'p')
Token(TAG_END)
Token(EOF)

"""

from tagtree.lexer.core import Lexer

__all__ = ["Lexer"]
