"""
Page Fetcher

Downloads one page and returns the same-domain links found on it.
"""

import asyncio
import logging

import aiohttp

from sitemapper.core.errors import FetchError, ParseError
from sitemapper.utils.parser import HTMLParseError, extract_links
from sitemapper.utils.urls import filter_urls, get_domain, with_prefix

logger = logging.getLogger(__name__)


class PageFetcher:
    """Single-GET page fetcher bound to an aiohttp session"""

    def __init__(self, session: aiohttp.ClientSession):
        self._session = session

    async def fetch_links(self, url: str) -> list[str]:
        """
        GET ``url`` and return the links that stay on its domain.

        The domain prefix is taken from the final response URL, so a seed
        that redirects from http to https is filtered against https.
        Non-2xx responses are parsed like any other body.

        Raises:
            FetchError: transport failure (DNS, refused, timeout, bad URL)
            ParseError: the body could not be parsed as HTML
        """
        try:
            async with self._session.get(url, allow_redirects=True) as resp:
                body = await resp.read()
                final_url = str(resp.url)
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise FetchError(url, f"{type(e).__name__}: {e}") from e

        if final_url != url:
            logger.debug(f"Redirected: {url} -> {final_url}")
        logger.debug(f"Fetched {url} (status={status}, {len(body)} bytes)")

        base = get_domain(final_url)
        try:
            links = extract_links(base, body)
        except HTMLParseError as e:
            raise ParseError(url, str(e)) from e

        return filter_urls(links, with_prefix(base))
