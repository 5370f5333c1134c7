"""Tree visitor and transformer for tagtree.

Provides a base visitor class with match-based dispatch, a pre-order
``walk`` generator, and an immutable transform function for rewriting
frozen trees.

Example: collect every link target:

    class HrefCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_element(self, node: Element) -> None:
            if node.tag_name == "a" and "href" in node.attributes:
                self.hrefs.append(node.attributes["href"])

    collector = HrefCollector()
    collector.visit(tree)

Example: drop every ``script`` element:

    def drop_scripts(node: Node) -> Node | None:
        if isinstance(node, Element) and node.tag_name == "script":
            return None
        return node

    new_tree = transform(tree, drop_scripts)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. ``walk`` and
    ``transform`` are pure, safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable, Iterator

from tagtree.nodes import Element, Node, Text


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_text`` / ``visit_element``. Unhandled
    node types fall through to ``visit_default``. Children are walked
    automatically after the ``visit_*`` call, in document order.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Default returns None (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_element(self, node: Element) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Element():
                return self.visit_element(node)
            case Text():
                return self.visit_text(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Element(children=children):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Element):
            stack.extend(reversed(current.children))


def transform(root: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    cannot be removed; returning None for it raises TypeError.

    Args:
        root: The tree to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new tree with the transformation applied. The original tree is
        untouched.

    """
    result = _transform_node(root, fn)
    if result is None:
        msg = "transform fn must return a node for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    match node:
        case Element(children=children):
            new_children = tuple(
                result for c in children
                if (result := _transform_node(c, fn)) is not None
            )
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: return as-is

    return node
