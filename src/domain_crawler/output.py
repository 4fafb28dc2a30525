"""JSONL output for crawl results."""

import json
from pathlib import Path
from typing import TextIO

from .models import Page


class StreamingOutputWriter:
    """Appends one JSON line per crawled page as results arrive."""

    def __init__(self, output_path: str | Path):
        self.output_path = Path(output_path)
        self._file: TextIO | None = None
        self._count = 0
        self._failed = 0

    def __enter__(self) -> "StreamingOutputWriter":
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.output_path, "w", encoding="utf-8")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file is not None:
            self._file.close()
            self._file = None

    def write_one(self, page: Page):
        """Write a page record and flush it."""
        if self._file is None:
            raise RuntimeError("StreamingOutputWriter must be used as context manager")

        self._file.write(json.dumps(page.to_dict(), ensure_ascii=False) + "\n")
        self._file.flush()
        self._count += 1
        if not page.ok:
            self._failed += 1

    @property
    def count(self) -> int:
        """Number of pages written."""
        return self._count

    @property
    def failed(self) -> int:
        """Number of written pages that carry a fetch error."""
        return self._failed
