"""Tests for tree construction by the recursive descent parser."""

from __future__ import annotations

import pytest

from tagtree import Parser, parse
from tagtree.nodes import Element, Text, elem, text


class TestElements:
    """Element structure, nesting and ordering."""

    def test_lonely_html_tag(self) -> None:
        assert parse("<html></html>") == elem("html")

    def test_lonely_tag_fields(self) -> None:
        node = parse("<tag></tag>")
        assert isinstance(node, Element)
        assert node.tag_name == "tag"
        assert dict(node.attributes) == {}
        assert node.children == ()

    def test_nested_single(self) -> None:
        expected = elem("html", {}, [elem("head")])
        assert parse("<html><head></head></html>") == expected

    def test_nesting_preserves_order(self) -> None:
        node = parse("<a><b></b><c></c></a>")
        assert node == elem("a", {}, [elem("b"), elem("c")])
        assert [child.tag_name for child in node.children] == ["b", "c"]

    def test_nested_multiple(self) -> None:
        expected = elem(
            "html",
            {},
            [elem("head"), elem("body"), elem("bruv")],
        )
        source = """
        <html>
            <head></head>
            <body></body>
            <bruv></bruv>
        </html>
        """
        assert parse(source) == expected

    def test_nested_deep(self) -> None:
        expected = elem("html", {}, [elem("body", {}, [elem("div", {}, [elem("div")])])])
        source = """
        <html>
            <body>
                <div>
                    <div>
                    </div>
                </div>
            </body>
        </html>
        """
        assert parse(source) == expected

    def test_tag_names_are_alphanumeric(self) -> None:
        node = parse("<h1>Title</h1>")
        assert node == elem("h1", {}, [text("Title")])

    def test_whitespace_inside_tags(self) -> None:
        assert parse("<  p  >hi</  p  >") == elem("p", {}, [text("hi")])


class TestAttributes:
    """Attribute extraction."""

    def test_attrib_single(self) -> None:
        node = parse('<tag attrib="attr val"></tag>')
        assert node == elem("tag", {"attrib": "attr val"})

    def test_attrib_multiple(self) -> None:
        source = """
            <image src="image.png" width="640" height="480">
            </image>
        """
        node = parse(source)
        assert node == elem(
            "image",
            {"src": "image.png", "width": "640", "height": "480"},
        )
        assert len(node.attributes) == 3

    def test_attribute_order_irrelevant(self) -> None:
        first = parse('<img a="1" b="2"></img>')
        second = parse('<img b="2" a="1"></img>')
        assert first == second

    def test_boolean_attribute(self) -> None:
        node = parse("<input disabled></input>")
        assert dict(node.attributes) == {"disabled": ""}

    def test_boolean_attribute_before_valued(self) -> None:
        node = parse('<input disabled value="x"></input>')
        assert dict(node.attributes) == {"disabled": "", "value": "x"}

    def test_duplicate_attribute_last_wins(self) -> None:
        node = parse('<p id="one" id="two"></p>')
        assert dict(node.attributes) == {"id": "two"}

    def test_empty_attribute_value(self) -> None:
        node = parse('<p title=""></p>')
        assert dict(node.attributes) == {"title": ""}

    def test_attribute_value_is_trimmed(self) -> None:
        node = parse('<p title="  padded  "></p>')
        assert node.get("title") == "padded"

    def test_attribute_value_allows_markup_characters(self) -> None:
        node = parse('<a href="/x?a=1&b=<2>"></a>')
        assert node.get("href") == "/x?a=1&b=<2>"

    def test_spaces_around_equals(self) -> None:
        node = parse('<p id = "x"></p>')
        assert dict(node.attributes) == {"id": "x"}

    def test_attributes_are_read_only(self) -> None:
        node = parse('<p id="x"></p>')
        with pytest.raises(TypeError):
            node.attributes["id"] = "y"  # type: ignore[index]


class TestText:
    """Text runs between tags."""

    def test_nested_text(self) -> None:
        expected = elem(
            "body",
            {},
            [text("uwu!"), elem("p", {}, [text("rawr :3")])],
        )
        source = """
        <body>
            uwu!
            <p>rawr :3</p>
        </body>
        """
        assert parse(source) == expected

    def test_mixed_inline_text(self) -> None:
        source = "<body>uwu!<p>rawr :3</p></body>"
        node = parse(source)
        assert node.children == (text("uwu!"), elem("p", {}, [text("rawr :3")]))

    def test_interior_whitespace_preserved(self) -> None:
        node = parse("<p>  a   b\n c  </p>")
        assert node.children == (Text("a   b\n c"),)

    def test_simple_html_doc(self) -> None:
        expected = elem(
            "html",
            {},
            [
                elem(
                    "body",
                    {},
                    [
                        elem("h1", {}, [text("Title")]),
                        elem(
                            "div",
                            {"id": "main", "class": "test"},
                            [
                                elem(
                                    "p",
                                    {},
                                    [
                                        text("Hello"),
                                        elem("em", {}, [text("world")]),
                                        text("!"),
                                    ],
                                )
                            ],
                        ),
                    ],
                )
            ],
        )
        source = """
            <html>
                <body>
                    <h1>Title</h1>
                    <div id="main" class="test">
                        <p>Hello <em>world</em>!</p>
                    </div>
                </body>
            </html>
        """
        assert parse(source) == expected

    def test_unknown_lexemes_become_text(self) -> None:
        """Characters that start no token are read as text, not errors."""
        node = parse("<p>!? 1 + 1 = 2 & done</p>")
        assert node.children == (text("!? 1 + 1 = 2 & done"),)

    def test_punctuation_tokens_in_text(self) -> None:
        node = parse('<p>"quoted" = > fine</p>')
        assert node.children == (text('"quoted" = > fine'),)

    def test_top_level_text(self) -> None:
        assert parse("just text") == text("just text")

    def test_empty_document(self) -> None:
        assert parse("") == text("")

    def test_whitespace_document(self) -> None:
        assert parse("  \n ") == text("")


class TestWhitespaceInsensitivity:
    """Layout whitespace between tags does not change the tree."""

    @pytest.mark.parametrize(
        "source",
        [
            "<a><b></b><c>x</c></a>",
            "<a>\n  <b></b>\n  <c>x</c>\n</a>\n",
            "\n\n   <a>   <b>  </b>\t<c>\n x \n</c>   </a>",
        ],
    )
    def test_same_tree(self, source: str) -> None:
        assert parse(source) == elem("a", {}, [elem("b"), elem("c", {}, [text("x")])])

    def test_no_empty_text_between_adjacent_tags(self) -> None:
        node = parse("<a>\n    <b></b>\n    \n    <c></c>\n</a>")
        assert all(isinstance(child, Element) for child in node.children)
        assert len(node.children) == 2

    def test_no_empty_text_in_empty_element(self) -> None:
        assert parse("<a>   \n   </a>").children == ()


class TestDocumentRoot:
    """The document is exactly one node."""

    def test_trailing_content_is_not_parsed(self) -> None:
        assert parse("<a></a><b></b>") == elem("a")

    def test_leading_text_is_the_root(self) -> None:
        assert parse("hello <a></a>") == text("hello")

    def test_parser_class_form(self) -> None:
        assert Parser("<a></a>").parse() == elem("a")

    def test_parser_is_rerunnable(self) -> None:
        parser = Parser("<a><b></b></a>")
        assert parser.parse() == parser.parse()
