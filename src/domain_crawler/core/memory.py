"""Deterministic in-memory fetcher for tests and demos."""

from dataclasses import dataclass, field
from html import escape

from ..exceptions import PageNotFoundError
from .protocols import Response


@dataclass
class MockPage:
    """A page served by MemoryFetcher."""
    title: str
    links: list[str] = field(default_factory=list)

    def render(self) -> str:
        links_chunk = "".join(
            f'<a href="{escape(link, quote=True)}">Some link</a>\n' for link in self.links
        )
        return f"<html><title>{escape(self.title)}</title>\n<body>{links_chunk}</body></html>"


class MemoryFetcher:
    """Serves fixed pages keyed by URL."""

    def __init__(self, pages: dict[str, MockPage]):
        self.pages = dict(pages)
        self.fetched: list[str] = []

    async def fetch(self, url: str) -> Response:
        self.fetched.append(url)
        page = self.pages.get(url)
        if page is None:
            raise PageNotFoundError(url)
        return Response(
            url=url,
            status=200,
            content=page.render().encode("utf-8"),
            headers={"content-type": "text/html; charset=utf-8"},
        )

    async def release(self, response: Response | None) -> None:
        pass
