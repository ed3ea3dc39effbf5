"""
Breadth-First Crawler

Walks a site level by level from a seed URL, following only same-domain
links, up to a maximum link depth.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable

import aiohttp

from sitemapper.core.config import settings
from sitemapper.core.errors import CrawlError
from sitemapper.services.fetcher import PageFetcher

logger = logging.getLogger(__name__)

FetchLinks = Callable[[str], Awaitable[list[str]]]


@dataclass
class CrawlResult:
    seed: str
    max_depth: int
    pages: list[str] = field(default_factory=list)
    # Number of frontier-expansion rounds that actually ran
    depth_reached: int = 0
    # url -> error message, only filled when errors are skipped
    failed: dict[str, str] = field(default_factory=dict)


class CrawlSession:
    """
    State of one crawl.

    Owns the visited set and the frontiers, so independent crawls can run
    side by side in the same process. ``fetch_links`` is any coroutine
    function mapping a URL to its same-domain links; it normally is
    :meth:`PageFetcher.fetch_links`.
    """

    def __init__(
        self,
        seed: str,
        max_depth: int,
        fetch_links: FetchLinks,
        concurrency: int = 1,
        skip_errors: bool = False,
    ):
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")

        self.seed = seed
        self.max_depth = max_depth
        self.concurrency = concurrency
        self.skip_errors = skip_errors
        self._fetch_links = fetch_links

        self.visited: set[str] = set()
        self.failed: dict[str, str] = {}
        self.depth_reached = 0

    async def run(self) -> CrawlResult:
        """
        Crawl from the seed and return every visited page.

        Depth 0 processes only the seed, so ``max_depth=0`` yields just the
        seed page. The loop stops early once a frontier comes up empty.

        Raises:
            CrawlError: first fetch or parse failure, unless skip_errors
        """
        sem = asyncio.Semaphore(self.concurrency)
        next_frontier: set[str] = {self.seed}

        for depth in range(self.max_depth + 1):
            frontier, next_frontier = next_frontier, set()
            if not frontier:
                break

            pending = [
                url
                for url in frontier
                if url not in self.visited and url not in self.failed
            ]
            logger.info(f"Depth {depth}: {len(pending)} URLs in frontier")
            self.depth_reached = depth + 1

            tasks = [
                asyncio.create_task(self._visit(url, next_frontier, sem))
                for url in pending
            ]
            try:
                await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        return CrawlResult(
            seed=self.seed,
            max_depth=self.max_depth,
            pages=sorted(self.visited),
            depth_reached=self.depth_reached,
            failed=dict(self.failed),
        )

    async def _visit(self, url: str, next_frontier: set[str], sem: asyncio.Semaphore):
        async with sem:
            try:
                links = await self._fetch_links(url)
            except CrawlError as e:
                if not self.skip_errors:
                    raise
                logger.warning(f"Skipping {url}: {e}")
                self.failed[url] = str(e)
                return

        for link in links:
            if link not in self.visited:
                next_frontier.add(link)

        logger.info(f"URL found: {url}")
        self.visited.add(url)


async def crawl(
    seed: str,
    max_depth: int = 3,
    concurrency: int = 1,
    skip_errors: bool = False,
    user_agent: str | None = None,
    timeout: float | None = None,
) -> CrawlResult:
    """
    Crawl a site with a fresh aiohttp session.

    Args:
        seed: Start URL; it is not validated, bad URLs surface as FetchError
        max_depth: Link hops to follow from the seed
        concurrency: Maximum in-flight fetches within one depth level
        skip_errors: Log and skip broken pages instead of aborting
        user_agent: User-Agent header (defaults to settings)
        timeout: Total request timeout in seconds (None = aiohttp default)

    Returns:
        CrawlResult with the sorted list of discovered pages
    """
    session_opts = {
        "headers": {"User-Agent": user_agent or settings.SITEMAP_USER_AGENT},
    }
    if timeout is not None:
        session_opts["timeout"] = aiohttp.ClientTimeout(total=timeout)

    logger.info(f"Crawling {seed} (max_depth={max_depth}, concurrency={concurrency})")

    async with aiohttp.ClientSession(**session_opts) as session:
        fetcher = PageFetcher(session)
        crawl_session = CrawlSession(
            seed,
            max_depth,
            fetcher.fetch_links,
            concurrency=concurrency,
            skip_errors=skip_errors,
        )
        result = await crawl_session.run()

    logger.info(f"Crawl finished: {len(result.pages)} pages")
    return result
