"""Tests for Page rendering."""

from domain_crawler.exceptions import PageNotFoundError
from domain_crawler.models import Page


class TestPage:
    def test_root_success_line(self):
        page = Page(
            url="https://domain.com/",
            depth=0,
            title="Home",
            sub_links=("https://domain.com/a/", "https://domain.com/b/"),
        )
        assert str(page) == "https://domain.com/ [Home] (with 2 sublinks)"

    def test_nested_success_line(self):
        """Two spaces per depth level followed by a marker."""
        page = Page(url="https://domain.com/a/b/", depth=2, title="B")
        assert str(page) == "    \\_ https://domain.com/a/b/ [B] (with 0 sublinks)"

    def test_error_line(self):
        page = Page(
            url="https://domain.com/x/",
            depth=1,
            error=PageNotFoundError("https://domain.com/x/"),
        )
        assert str(page) == "  \\_ https://domain.com/x/ /!\\ Error: not found: https://domain.com/x/"
        assert not page.ok

    def test_ok_without_error(self):
        assert Page(url="https://domain.com/", depth=0).ok

    def test_to_dict(self):
        page = Page(
            url="https://domain.com/",
            depth=0,
            title="Home",
            sub_links=("https://domain.com/b/", "https://domain.com/a/"),
        )
        assert page.to_dict() == {
            "url": "https://domain.com/",
            "depth": 0,
            "title": "Home",
            "error": None,
            "sub_links": ["https://domain.com/a/", "https://domain.com/b/"],
        }

    def test_to_dict_error(self):
        page = Page(url="https://domain.com/x/", depth=3, error=PageNotFoundError("https://domain.com/x/"))
        assert page.to_dict()["error"] == "not found: https://domain.com/x/"
