"""Crawler engine with async concurrency."""

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Sequence
from contextlib import nullcontext

import typer

from .config import CrawlConfig, settings
from .core import Fetcher, HttpFetcher, Response
from .exceptions import CrawlTaskError, FetchError
from .links import filter_links
from .models import Page
from .output import StreamingOutputWriter
from .parser import DocumentParser
from .session import CompletionCounter, ResultStream, VisitedRegistry

logger = logging.getLogger(__name__)


class CrawlSession:
    """State of one crawl, from the seed URL until the result stream closes.

    Every URL gets its own task. A task that finds new links claims them in
    the registry and spawns one child task per claimed link. The task whose
    exit brings the completion counter to zero closes the result stream.
    """

    def __init__(self, config: CrawlConfig, fetcher: Fetcher, parser: DocumentParser):
        self.config = config
        self.fetcher = fetcher
        self.parser = parser
        self.registry = VisitedRegistry()
        self.counter = CompletionCounter()
        self.results = ResultStream()
        self.failures: list[CrawlTaskError] = []
        self._tasks: set[asyncio.Task] = set()

    def start(self) -> None:
        """Spawn the root task for the seed URL."""
        self._spawn(self.config.seed_url, 0)

    def _spawn(self, url: str, depth: int) -> None:
        task = asyncio.create_task(self._crawl_page(url, depth), name=f"crawl:{url}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _crawl_page(self, url: str, depth: int) -> None:
        # The root announces itself, children are announced by their parent
        if depth == 0:
            self.counter.increase()
        try:
            max_depth = self.config.max_depth
            if max_depth > 0 and depth >= max_depth:
                logger.debug("Depth cutoff at %s (depth %d)", url, depth)
                return
            await self._visit(url, depth)
        except Exception as e:
            logger.exception("Crawl task for %s failed", url)
            self.failures.append(CrawlTaskError(url, e))
        finally:
            self.counter.decrease()
            if self.counter.is_complete():
                logger.debug("Last task finished, closing result stream")
                self.results.close()

    async def _visit(self, url: str, depth: int) -> None:
        response: Response | None = None
        try:
            try:
                response = await self.fetcher.fetch(url)
            except FetchError as e:
                logger.debug("Fetch failed for %s: %s", url, e)
                self.registry.mark(url)
                await self.results.put(Page(url=url, depth=depth, error=e))
                return

            self.registry.mark(url)
            document = self.parser.parse(response.content, url, response.encoding)
            sub_links = filter_links(document.links, url, self.config.ignored_path_prefixes)
            await self.results.put(Page(
                url=url,
                depth=depth,
                title=document.title,
                sub_links=tuple(sub_links),
            ))

            for link in sub_links:
                if self.registry.try_claim(link):
                    self.counter.increase()
                    logger.debug("Spawning %s (depth %d)", link, depth + 1)
                    self._spawn(link, depth + 1)
        finally:
            await self.fetcher.release(response)


class Crawler:
    """Crawls every same-domain page reachable from a seed URL."""

    def __init__(
        self,
        config: CrawlConfig,
        fetcher: Fetcher,
        parser: DocumentParser | None = None,
    ):
        self.config = config
        self.fetcher = fetcher
        self.parser = parser or DocumentParser()

    async def crawl(self) -> AsyncIterator[Page]:
        """Yield one page per claimed URL as soon as it is fetched.

        Each call runs an independent session. Raises CrawlTaskError after
        the last page if a task failed with something other than a fetch error.
        """
        session = CrawlSession(self.config, self.fetcher, self.parser)
        session.start()
        async for page in session.results:
            yield page
        if session.failures:
            raise session.failures[0]


async def run_crawl(
    seed_url: str,
    max_depth: int = 0,
    ignored_path_prefixes: Sequence[str] = (),
    output_path: str | None = None,
    fetcher: Fetcher | None = None,
) -> int:
    """Run a crawl, print each result and return the number of results."""
    config = CrawlConfig(
        seed_url=seed_url,
        max_depth=max_depth,
        ignored_path_prefixes=tuple(ignored_path_prefixes),
    )

    own_fetcher = fetcher is None
    if fetcher is None:
        fetcher = HttpFetcher(
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        )

    crawler = Crawler(config, fetcher)
    results_count = 0
    start_time = time.time()
    try:
        with StreamingOutputWriter(output_path) if output_path else nullcontext() as writer:
            async for page in crawler.crawl():
                typer.echo(str(page))
                if writer is not None:
                    writer.write_one(page)
                results_count += 1
    finally:
        if own_fetcher:
            await fetcher.close()

    elapsed = time.time() - start_time
    typer.echo(f"\n** Finished **\n{results_count} URLs found in {elapsed:.2f}s.")
    if writer is not None:
        typer.echo(f"Results saved to {output_path} ({writer.failed} with errors)")
    return results_count
