"""Visitor: collect every link and report malformed pages."""

from tagtree import ParseError, parse
from tagtree.nodes import Element
from tagtree.visitor import BaseVisitor


class LinkCollector(BaseVisitor[None]):
    """Collect (href, text) pairs in document order."""

    def __init__(self) -> None:
        self.links: list[tuple[str, str]] = []

    def visit_element(self, node: Element) -> None:
        if node.tag_name != "a":
            return
        label = " ".join(getattr(child, "content", "") for child in node.children)
        self.links.append((node.attributes.get("href", ""), label))


pages = {
    "index.html": """
<html>
    <body>
        <a href="docs.html">Docs</a>
        <p>See also <a href="faq.html">the FAQ</a>.</p>
    </body>
</html>
""",
    "broken.html": "<html><body></html>",
}

for name, source in pages.items():
    try:
        tree = parse(source, source_file=name)
    except ParseError as e:
        print(f"error: {e}")
        continue
    collector = LinkCollector()
    collector.visit(tree)
    for href, label in collector.links:
        print(f"{name}: {label} -> {href}")
