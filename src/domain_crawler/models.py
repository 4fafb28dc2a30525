"""Result records produced by a crawl."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Page:
    """Outcome of one fetch attempt.

    A page either carries an ``error`` or a title and the sub-links found on it.
    """

    url: str
    depth: int
    title: str = ""
    error: Exception | None = None
    sub_links: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.error is None

    def _indent(self) -> str:
        if self.depth < 1:
            return ""
        return "  " * self.depth + "\\_ "

    def __str__(self) -> str:
        if self.error is not None:
            return f"{self._indent()}{self.url} /!\\ Error: {self.error}"
        return f"{self._indent()}{self.url} [{self.title}] (with {len(self.sub_links)} sublinks)"

    def to_dict(self) -> dict:
        """Serialisable view of the page for JSON output."""
        return {
            "url": self.url,
            "depth": self.depth,
            "title": self.title,
            "error": str(self.error) if self.error is not None else None,
            "sub_links": sorted(self.sub_links),
        }
