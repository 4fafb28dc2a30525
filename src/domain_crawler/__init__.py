"""Same-domain website crawler."""

from .config import CrawlConfig
from .crawl import Crawler, run_crawl
from .models import Page

__version__ = "0.1.0"

__all__ = ["CrawlConfig", "Crawler", "Page", "run_crawl", "__version__"]
