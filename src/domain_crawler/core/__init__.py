"""Core crawler components."""

from .fetcher import HttpFetcher
from .memory import MemoryFetcher, MockPage
from .protocols import Fetcher, Response

__all__ = ["Fetcher", "Response", "HttpFetcher", "MemoryFetcher", "MockPage"]
