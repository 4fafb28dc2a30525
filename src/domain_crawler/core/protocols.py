"""Protocol definitions for crawler components."""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class Response:
    """Fetched document container."""

    url: str
    status: int
    content: bytes
    headers: dict[str, str]
    # Underlying transport handle, released by Fetcher.release()
    raw: Any = field(default=None, repr=False, compare=False)

    @property
    def encoding(self) -> str | None:
        """Charset declared in the Content-Type header, if any."""
        for name, value in self.headers.items():
            if name.lower() != "content-type":
                continue
            for param in value.split(";")[1:]:
                key, _, charset = param.strip().partition("=")
                if key.strip().lower() == "charset" and charset.strip(" \"'"):
                    return charset.strip(" \"'").lower()
        return None

    @property
    def text(self) -> str:
        """Decode content with the declared charset, UTF-8 otherwise."""
        return decode_content(self.content, self.encoding)


def decode_content(content: bytes, encoding: str | None = None) -> str:
    """Decode a document body, falling back to UTF-8 for unknown charsets."""
    if encoding:
        try:
            return content.decode(encoding, errors="replace")
        except LookupError:
            pass
    return content.decode("utf-8", errors="replace")


class Fetcher(Protocol):
    """Protocol for URL fetchers.

    ``fetch`` raises ``FetchError`` when the document cannot be retrieved.
    Callers invoke ``release`` after every fetch, with ``None`` when the
    fetch failed.
    """

    async def fetch(self, url: str) -> Response:
        """Fetch a URL and return the response."""
        ...

    async def release(self, response: Response | None) -> None:
        """Free resources held by a response."""
        ...
