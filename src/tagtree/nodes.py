"""Typed DOM nodes for tagtree.

All nodes are frozen dataclasses with slots for:
- Immutability: the tree is built once by the parser and never mutated
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: ``match`` statements work naturally

Node Hierarchy:
Node (base)
├── Text
└── Element

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

type AttrMap = Mapping[str, str]

_EMPTY_ATTRS: AttrMap = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for DOM nodes."""


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A run of literal text between tags.

    The parser stores the run with surrounding whitespace trimmed.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An element with a tag name, attributes and ordered children.

    ``attributes`` is stored as a read-only mapping and ``children`` as a
    tuple, whatever mapping or iterable the caller passes in.

    """

    tag_name: str
    attributes: AttrMap = field(default_factory=lambda: _EMPTY_ATTRS)
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        # Safe mutation of frozen dataclass during construction
        if not isinstance(self.attributes, MappingProxyType):
            object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute ``name``, or ``default``."""
        return self.attributes.get(name, default)


def text(data: str) -> Text:
    """Build a Text node."""
    return Text(data)


def elem(
    name: str,
    attrs: AttrMap | None = None,
    children: Iterable[Node] = (),
) -> Element:
    """Build an Element node.

    Args:
        name: Tag name
        attrs: Attribute mapping; None means no attributes
        children: Child nodes in document order

    Example:
        >>> elem("p", {"class": "lead"}, [text("hi")])
        Element(tag_name='p', attributes=mappingproxy({'class': 'lead'}), children=(Text(content='hi'),))
    """
    return Element(
        tag_name=name,
        attributes=_EMPTY_ATTRS if attrs is None else attrs,
        children=tuple(children),
    )
