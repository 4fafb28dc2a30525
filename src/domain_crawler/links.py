"""Link resolution and scoping."""

from collections.abc import Iterable, Sequence
from urllib.parse import urldefrag, urljoin, urlsplit


def normalize_link(raw: str, base_url: str, ignored_prefixes: Sequence[str] = ()) -> str | None:
    """Resolve ``raw`` against ``base_url`` and apply the crawl scope.

    Returns the absolute URL without fragment, or None if the link is
    malformed, points to another host, or its path starts with one of
    ``ignored_prefixes``.
    """
    try:
        absolute = urljoin(base_url, raw.strip())
        absolute = urldefrag(absolute).url
        parts = urlsplit(absolute)
    except ValueError:
        return None

    # Host compared verbatim, subdomains are other hosts
    if parts.netloc != urlsplit(base_url).netloc:
        return None

    for prefix in ignored_prefixes:
        if parts.path.startswith(prefix):
            return None

    return absolute


def filter_links(
    raw_links: Iterable[str],
    base_url: str,
    ignored_prefixes: Sequence[str] = (),
) -> list[str]:
    """Normalize the links found on one page and drop duplicates."""
    seen: set[str] = set()
    links = []
    for raw in raw_links:
        link = normalize_link(raw, base_url, ignored_prefixes)
        if link is None or link in seen:
            continue
        seen.add(link)
        links.append(link)
    return links
