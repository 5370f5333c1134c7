"""Tests for the top-level parse() entry point."""

import pytest

from tagtree import Element, ParseConfig, ParseError, Text, parse


class TestParse:
    def test_returns_element_root(self) -> None:
        tree = parse('<p class="lead">Hello <em>world</em></p>')
        assert isinstance(tree, Element)
        assert tree.tag_name == "p"
        assert dict(tree.attributes) == {"class": "lead"}
        assert isinstance(tree.children[0], Text)
        assert isinstance(tree.children[1], Element)

    def test_returns_text_root(self) -> None:
        assert isinstance(parse("plain"), Text)

    def test_source_file_in_errors(self) -> None:
        with pytest.raises(ParseError, match=r"^docs/index\.html:1:6 "):
            parse("<a></b>", source_file="docs/index.html")

    def test_config_is_per_call(self) -> None:
        with pytest.raises(ParseError):
            parse("<a><b></b></a>", config=ParseConfig(max_depth=1))
        assert parse("<a><b></b></a>").tag_name == "a"

    def test_trees_compare_structurally(self) -> None:
        assert parse("<a>\n  <b>x</b>\n</a>") == parse("<a><b>x</b></a>")

    def test_result_is_immutable(self) -> None:
        tree = parse("<a></a>")
        with pytest.raises(AttributeError):
            tree.tag_name = "b"  # type: ignore[misc]
