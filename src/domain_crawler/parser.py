"""HTML document parsing using selectolax."""

import logging
from dataclasses import dataclass, field

from selectolax.parser import HTMLParser

from .core.protocols import decode_content

logger = logging.getLogger(__name__)


@dataclass
class ParsedDocument:
    """Title and raw link targets of a document."""
    title: str = ""
    links: list[str] = field(default_factory=list)


class DocumentParser:
    """Extract the title and anchor targets from an HTML document.

    Links are returned exactly as written in the ``href`` attributes, in
    document order. Resolving and filtering them is left to the caller.
    Malformed markup never raises; whatever the parser recovers is returned.
    """

    def parse(
        self,
        content: bytes | str,
        base_url: str,
        encoding: str | None = None,
    ) -> ParsedDocument:
        """Parse a document. Bytes are decoded with ``encoding``, or UTF-8 when it is not given."""
        if isinstance(content, bytes):
            content = decode_content(content, encoding)
        tree = HTMLParser(content)

        title = ""
        title_node = tree.css_first("title")
        if title_node is not None:
            title = title_node.text(strip=True)

        links = []
        for node in tree.css("a[href]"):
            href = node.attributes.get("href")
            if href is not None:
                links.append(href)

        logger.debug("Parsed %s: title=%r, %d raw links", base_url, title, len(links))
        return ParsedDocument(title=title, links=links)
