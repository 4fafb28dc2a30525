"""Configuration using pydantic-settings."""

from dataclasses import dataclass, field
from urllib.parse import urldefrag, urlsplit

from pydantic import Field
from pydantic_settings import BaseSettings


class CrawlerSettings(BaseSettings):
    """Crawler configuration."""

    timeout: float = 10.0
    user_agent: str = "DomainCrawler/0.1 (+https://github.com/domain-crawler)"
    max_connections: int = 100
    max_keepalive_connections: int = 20
    max_depth: int = Field(10, ge=0)
    ignored_path_prefixes: list[str] = ["/cdn-cgi", "/help", "/blog"]

    model_config = {"env_prefix": "CRAWLER_"}


settings = CrawlerSettings()


@dataclass(frozen=True)
class CrawlConfig:
    """Options of a single crawl session.

    ``max_depth`` of 0 means unbounded. Otherwise pages at depth
    ``0..max_depth-1`` are fetched.
    """

    seed_url: str
    max_depth: int = 0
    ignored_path_prefixes: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        parts = urlsplit(self.seed_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"seed URL must be an absolute http(s) URL: {self.seed_url!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "seed_url", urldefrag(self.seed_url).url)
        object.__setattr__(self, "ignored_path_prefixes", tuple(self.ignored_path_prefixes))
