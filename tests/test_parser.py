"""Tests for the HTML document parser."""

import pytest

from domain_crawler.parser import DocumentParser

URL = "https://domain.com/"


@pytest.fixture
def parser():
    return DocumentParser()


class TestDocumentParser:
    def test_extracts_title_and_links(self, parser):
        html = b"""
        <html><head><title>  The Domain website </title></head>
        <body><a href="/a/">A</a> <a href="https://domain.com/b/">B</a></body></html>
        """
        document = parser.parse(html, URL)
        assert document.title == "The Domain website"
        assert document.links == ["/a/", "https://domain.com/b/"]

    def test_links_are_raw(self, parser):
        """Links are returned unresolved, duplicates and fragments included."""
        html = b'<a href="/a/#x">1</a><a href="/a/#x">2</a><a href="mailto:x@y.z">3</a>'
        document = parser.parse(html, URL)
        assert document.links == ["/a/#x", "/a/#x", "mailto:x@y.z"]

    def test_missing_title(self, parser):
        document = parser.parse(b"<html><body><p>No title</p></body></html>", URL)
        assert document.title == ""
        assert document.links == []

    def test_first_title_wins(self, parser):
        document = parser.parse(b"<title>First</title><title>Second</title>", URL)
        assert document.title == "First"

    def test_anchor_without_href_ignored(self, parser):
        document = parser.parse(b'<a name="top">Top</a><a href="/x">X</a>', URL)
        assert document.links == ["/x"]

    def test_malformed_markup(self, parser):
        """Broken markup does not raise and yields what can be recovered."""
        html = b'<html><title>Broken</title><body><a href="/a/">A<div><a href="/b/"'
        document = parser.parse(html, URL)
        assert document.title == "Broken"
        assert "/a/" in document.links

    def test_invalid_utf8(self, parser):
        document = parser.parse(b"<title>\xff\xfeOops</title>", URL)
        assert "Oops" in document.title

    def test_empty_document(self, parser):
        document = parser.parse(b"", URL)
        assert document.title == ""
        assert document.links == []

    def test_accepts_text(self, parser):
        document = parser.parse('<title>Text</title><a href="/t">t</a>', URL)
        assert document.title == "Text"
        assert document.links == ["/t"]

    def test_declared_encoding(self, parser):
        """Bytes are decoded with the charset passed by the caller."""
        content = "<title>Señor Café</title>".encode("cp1252")
        assert parser.parse(content, URL, "cp1252").title == "Señor Café"

    def test_unknown_encoding_falls_back_to_utf8(self, parser):
        content = "<title>Café</title>".encode("utf-8")
        assert parser.parse(content, URL, "bogus-charset").title == "Café"
