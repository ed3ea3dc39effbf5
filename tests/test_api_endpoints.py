"""
API Endpoint Tests

Tests for the FastAPI routes.
"""

from unittest.mock import AsyncMock, patch

from sitemapper.core.errors import FetchError
from sitemapper.services.crawler import CrawlResult

PAGES = ["https://example.com/", "https://example.com/a"]


def _result():
    return CrawlResult(
        seed="https://example.com/", max_depth=1, pages=PAGES, depth_reached=2
    )


def test_health_endpoints(test_client):
    for path in ("/health", "/api/v1/health"):
        response = test_client.get(path)
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


def test_crawl_endpoint(test_client):
    with patch(
        "sitemapper.api.routes.sitemap.crawl", new_callable=AsyncMock
    ) as mock_crawl:
        mock_crawl.return_value = _result()
        response = test_client.post(
            "/api/v1/crawl", json={"url": "https://example.com/", "depth": 1}
        )

    assert response.status_code == 200
    data = response.json()
    assert data["pages"] == PAGES
    assert data["count"] == 2
    assert data["depth_reached"] == 2
    assert data["failed"] == {}
    assert mock_crawl.call_args.kwargs["max_depth"] == 1


def test_sitemap_endpoint(test_client):
    with patch(
        "sitemapper.api.routes.sitemap.crawl", new_callable=AsyncMock
    ) as mock_crawl:
        mock_crawl.return_value = _result()
        response = test_client.post("/api/v1/sitemap", json={"url": "https://example.com/"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert "<loc>https://example.com/a</loc>" in response.text


def test_crawl_failure_returns_502(test_client):
    with patch(
        "sitemapper.api.routes.sitemap.crawl", new_callable=AsyncMock
    ) as mock_crawl:
        mock_crawl.side_effect = FetchError("https://down.example/", "refused")
        response = test_client.post("/api/v1/sitemap", json={"url": "https://down.example/"})

    assert response.status_code == 502
    assert "refused" in response.json()["detail"]


def test_invalid_depth_rejected(test_client):
    response = test_client.post(
        "/api/v1/crawl", json={"url": "https://example.com/", "depth": -1}
    )
    assert response.status_code == 422


def test_serialization_failure_returns_500(test_client):
    with patch(
        "sitemapper.api.routes.sitemap.crawl", new_callable=AsyncMock
    ) as mock_crawl:
        mock_crawl.return_value = CrawlResult(
            seed="https://example.com/",
            max_depth=1,
            pages=["https://example.com/", "https://example.com/\x01"],
            depth_reached=2,
        )
        response = test_client.post("/api/v1/sitemap", json={"url": "https://example.com/"})

    assert response.status_code == 500
    assert "serialization" in response.json()["detail"]


def test_deep_crawl_accepted(test_client):
    with patch(
        "sitemapper.api.routes.sitemap.crawl", new_callable=AsyncMock
    ) as mock_crawl:
        mock_crawl.return_value = _result()
        response = test_client.post(
            "/api/v1/crawl", json={"url": "https://example.com/", "depth": 50}
        )

    assert response.status_code == 200
    assert mock_crawl.call_args.kwargs["max_depth"] == 50
