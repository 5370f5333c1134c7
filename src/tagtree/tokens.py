"""Token and TokenType definitions for the tagtree lexer.

The lexer hands Token objects to the parser one at a time. Each Token has a
type, the text it covers (only identifiers carry text) and the cursor offset
it was read at.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed: the grammar only ever needs these seven kinds.

    """

    OPEN_TAG_START = auto()  # <
    CLOSE_TAG_START = auto()  # </
    TAG_END = auto()  # >
    QUOTE = auto()  # "
    EQUALS = auto()  # =
    IDENTIFIER = auto()  # alphanumeric word, e.g. cat12
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Identifier text; empty for punctuation, EOF and for an
            identifier that has only been peeked
        offset: Cursor position in the source where the token starts.
            Excluded from comparison, so tokens compare by type and value.

    """

    type: TokenType
    value: str = ""
    offset: int = field(default=-1, compare=False)

    def same_type(self, other: "Token") -> bool:
        """Compare by kind only, ignoring the identifier payload."""
        return self.type is other.type

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.IDENTIFIER:
            val = self.value
            if len(val) > 20:
                val = val[:17] + "..."
            return f"Token({self.type.name}, {val!r})"
        return f"Token({self.type.name})"

