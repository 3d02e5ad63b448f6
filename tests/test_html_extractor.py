"""Tests for HTML title and description extraction."""

from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from urlfeed.errors import ParseError
from urlfeed.extract import ContentKind, extract_html_metadata, traverse_document
from urlfeed.extract.html import iter_elements, parse_document


def walk(markup: str, max_depth: int = 256) -> tuple[str, str]:
    """Helper to traverse a markup string."""
    return traverse_document(BeautifulSoup(markup, "html.parser"), max_depth)


class TestTraverseDocument:
    """Tests for the depth-first document walk."""

    def test_title_and_name_description(self):
        markup = """
        <html><head>
          <title>Hello World</title>
          <meta name="description" content="A greeting">
        </head><body></body></html>
        """
        assert walk(markup) == ("Hello World", "A greeting")

    def test_og_description(self):
        markup = '<head><meta property="og:description" content="From OG"></head>'
        assert walk(markup) == ("", "From OG")

    def test_first_meta_in_document_order_wins_og_first(self):
        """No fixed preference between name and property kinds."""
        markup = """
        <head>
          <meta property="og:description" content="og value">
          <meta name="description" content="name value">
        </head>
        """
        assert walk(markup)[1] == "og value"

    def test_first_meta_in_document_order_wins_name_first(self):
        markup = """
        <head>
          <meta name="description" content="name value">
          <meta property="og:description" content="og value">
        </head>
        """
        assert walk(markup)[1] == "name value"

    def test_later_sibling_still_found(self):
        """An empty first subtree does not stop the walk."""
        markup = """
        <html><body>
          <div><p>Nothing <span>here</span></p></div>
          <section>
            <title>Late Title</title>
            <meta name="description" content="Late description">
          </section>
        </body></html>
        """
        assert walk(markup) == ("Late Title", "Late description")

    def test_walk_stops_once_both_found(self):
        """No element after the one that fills the second slot is visited."""
        markup = """
        <head>
          <title>Found</title>
          <meta id="first" name="description" content="First">
          <meta id="later" property="og:description" content="Later">
        </head>
        <body id="body"><div id="deep"><title>Other</title></div></body>
        """
        visited = []

        def recording(root, max_depth=256):
            for node in iter_elements(root, max_depth):
                visited.append(node)
                yield node

        with patch("urlfeed.extract.html.iter_elements", side_effect=recording):
            assert walk(markup) == ("Found", "First")

        assert visited[-1].get("id") == "first"
        visited_ids = {node.get("id") for node in visited}
        assert visited_ids.isdisjoint({"later", "body", "deep"})

    def test_iter_elements_is_pre_order(self):
        soup = BeautifulSoup("<a><b><c></c></b><d></d></a><e></e>", "html.parser")
        assert [node.name for node in iter_elements(soup)][1:] == ["a", "b", "c", "d", "e"]

    def test_first_title_wins(self):
        markup = """
        <head><title>First</title><meta name="description" content="d"></head>
        <body><title>Second</title></body>
        """
        assert walk(markup)[0] == "First"

    def test_blank_title_does_not_fill_slot(self):
        """A whitespace-only title lets a later title be captured."""
        markup = "<title>   </title><div><title>Real</title></div>"
        assert walk(markup)[0] == "Real"

    def test_title_whitespace_and_entities(self):
        markup = "<title>\n  Tom &amp; Jerry\n   Show </title>"
        assert walk(markup)[0] == "Tom & Jerry Show"

    def test_meta_without_content_ignored(self):
        markup = """
        <meta name="description" content="">
        <meta name="description">
        <meta name="keywords" content="a, b">
        <meta name="description" content="usable">
        """
        assert walk(markup)[1] == "usable"

    def test_meta_attribute_case_insensitive(self):
        markup = '<META NAME="Description" CONTENT="Shouting">'
        assert walk(markup)[1] == "Shouting"

    def test_depth_limit_stops_descent(self):
        """Elements below the depth limit are not visited."""
        markup = "<div>" * 10 + "<title>Deep</title>" + "</div>" * 10
        assert walk(markup, max_depth=5)[0] == ""
        assert walk(markup)[0] == "Deep"

    def test_deep_document_does_not_recurse(self):
        """Very deep nesting is walked without hitting the recursion limit."""
        markup = "<div>" * 3000 + "<title>Bottom</title>" + "</div>" * 3000
        assert walk(markup, max_depth=5000)[0] == "Bottom"


class TestExtractHtmlMetadata:
    """Tests for extract_html_metadata function."""

    def test_document_metadata(self):
        body = b"<html><head><title>Page</title><meta name='description' content='Desc'></head></html>"
        meta = extract_html_metadata(body, "https://example.com/page")

        assert meta.kind is ContentKind.HTML
        assert meta.title == "Page"
        assert meta.description == "Desc"

    def test_missing_title_falls_back_to_host(self):
        meta = extract_html_metadata(b"<html><body></body></html>", "https://www.example.com/page")
        assert meta.title == "example.com"

    def test_missing_description_falls_back_to_url(self):
        url = "https://www.example.com/page?id=1"
        meta = extract_html_metadata(b"<title>T</title>", url)
        assert meta.description == url

    def test_missing_title_uses_url_pattern(self):
        """x.com pages have no server-side title, the account name is used."""
        meta = extract_html_metadata(b"<html></html>", "https://x.com/jack/status/20?s=20")
        assert meta.title == "jack"

    def test_title_is_not_decorated(self):
        meta = extract_html_metadata(b"<title>Video</title>", "https://www.youtube.com/watch?v=x")
        assert meta.title == "Video"

    def test_declared_charset(self):
        body = "<title>Café</title>".encode("iso-8859-1")
        meta = extract_html_metadata(body, "https://example.com/", charset="iso-8859-1")
        assert meta.title == "Café"

    def test_parser_rejection_raises_parse_error(self):
        with patch("urlfeed.extract.html.BeautifulSoup", side_effect=ParserRejectedMarkup("bad")):
            with pytest.raises(ParseError) as exc_info:
                parse_document(b"<html>", "https://example.com/")

        assert exc_info.value.url == "https://example.com/"
