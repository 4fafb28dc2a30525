"""Exceptions raised by the crawler and its collaborators."""


class CrawlerError(Exception):
    """Base class for crawler errors."""


class FetchError(CrawlerError):
    """Raised by a fetcher when a document cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class PageNotFoundError(FetchError):
    """Raised when a fetcher has no document for the URL."""

    def __init__(self, url: str):
        super().__init__(url, f"not found: {url}")


class StreamClosedError(CrawlerError):
    """Raised when a result stream is used after it was closed."""


class CrawlTaskError(CrawlerError):
    """Raised when a crawl task failed for a reason other than a fetch error."""

    def __init__(self, url: str, original: BaseException):
        self.url = url
        self.original = original
        super().__init__(f"crawl task for {url} failed: {original!r}")
