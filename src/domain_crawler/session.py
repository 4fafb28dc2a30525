"""Shared state of a crawl session: visited URLs, live task count, results."""

import asyncio
import threading
from collections.abc import AsyncIterator

from .exceptions import StreamClosedError
from .models import Page


class VisitedRegistry:
    """Set of URLs claimed during one crawl session."""

    def __init__(self):
        self._urls: set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, url: str) -> bool:
        """Insert ``url`` and return True, or return False if it was already there."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def mark(self, url: str) -> None:
        """Record ``url`` as visited without checking for a previous claim."""
        with self._lock:
            self._urls.add(url)

    def __contains__(self, url: str) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)


class CompletionCounter:
    """Number of crawl tasks announced and not yet finished.

    A parent increases the counter before it spawns a child, so the count
    cannot reach zero while a child is about to start.
    """

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increase(self) -> None:
        with self._lock:
            self._value += 1

    def decrease(self) -> None:
        with self._lock:
            if self._value == 0:
                raise RuntimeError("completion counter decreased below zero")
            self._value -= 1

    def is_complete(self) -> bool:
        with self._lock:
            return self._value == 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


_CLOSED = object()


class ResultStream:
    """Channel of pages from many crawl tasks to a single consumer.

    Iterating the stream yields pages until ``close()`` has been called and
    every page put before it has been read.
    """

    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False
        self._exhausted = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def put(self, page: Page) -> None:
        if self._closed:
            raise StreamClosedError(f"result stream is closed, dropping {page.url}")
        await self._queue.put(page)

    def close(self) -> None:
        if self._closed:
            raise StreamClosedError("result stream closed twice")
        self._closed = True
        self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> AsyncIterator[Page]:
        return self

    async def __anext__(self) -> Page:
        if self._exhausted:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            self._exhausted = True
            raise StopAsyncIteration
        return item
