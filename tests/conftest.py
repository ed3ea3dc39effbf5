"""
Test configuration and fixtures for sitemapper tests
"""

import aiohttp
import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from sitemapper.core.errors import FetchError


def make_response(url: str, body: bytes, status: int = 200) -> MagicMock:
    """Mock aiohttp response whose final URL is ``url``"""
    response = MagicMock()
    response.url = url
    response.status = status
    response.read = AsyncMock(return_value=body)
    return response


def make_session(pages: dict[str, bytes], redirects: dict[str, str] | None = None):
    """
    Mock aiohttp ClientSession serving ``pages``.

    ``redirects`` maps a requested URL to the final URL reported by the
    response. Unknown URLs raise a connection error.
    """
    redirects = redirects or {}

    def get(url, **kwargs):
        final_url = redirects.get(url, url)
        if final_url not in pages:
            raise aiohttp.ClientConnectionError(f"Cannot connect to {url}")
        ctx = MagicMock()
        ctx.__aenter__.return_value = make_response(final_url, pages[final_url])
        return ctx

    session = MagicMock()
    session.get.side_effect = get
    return session


@pytest.fixture
def link_graph_fetcher():
    """
    Build a fetch_links coroutine function from a link graph.

    URLs missing from the graph fail like an unreachable host. Every call
    is recorded in ``fetch_links.calls``.
    """

    def factory(graph: dict[str, list[str]]):
        calls = []

        async def fetch_links(url: str) -> list[str]:
            calls.append(url)
            if url not in graph:
                raise FetchError(url, "connection refused")
            return list(graph[url])

        fetch_links.calls = calls
        return fetch_links

    return factory


@pytest.fixture
def example_site():
    """The example.com site used across crawl tests"""
    return {
        "https://example.com/": b"""
            <html><body>
                <a href="/a">A</a>
                <a href="https://example.com/b">B</a>
                <a href="https://other.com/c">Other</a>
                <a href="mailto:x@y.com">Mail</a>
            </body></html>
        """,
        "https://example.com/a": b"<html><body><p>No links</p></body></html>",
        "https://example.com/b": b"<html><body><p>No links</p></body></html>",
    }


@pytest.fixture
def test_client():
    """FastAPI test client"""
    from sitemapper.main import app

    return TestClient(app)
