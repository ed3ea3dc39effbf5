"""
Sitemap Router

Runs a crawl per request and returns the discovered pages, either as JSON
or as sitemap XML. Crawl failures never take the service down; they are
reported as 502 responses.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from sitemapper.core.config import settings
from sitemapper.core.errors import CrawlError, SitemapError
from sitemapper.models.crawl import CrawlRequest, CrawlResponse
from sitemapper.services.crawler import CrawlResult, crawl
from sitemapper.services.sitemap import render_sitemap

logger = logging.getLogger(__name__)

router = APIRouter()


async def _run_crawl(request: CrawlRequest) -> CrawlResult:
    try:
        return await crawl(
            request.url,
            max_depth=request.depth,
            concurrency=request.concurrency,
            skip_errors=request.skip_errors,
            timeout=settings.SITEMAP_TIMEOUT_SEC,
        )
    except CrawlError as e:
        logger.warning(f"Crawl of {request.url} failed: {e}")
        raise HTTPException(status_code=502, detail=f"Crawl failed: {e}")


@router.post("/crawl", response_model=CrawlResponse)
async def crawl_site(request: CrawlRequest):
    """Crawl a site and return the discovered pages as JSON."""
    result = await _run_crawl(request)
    return CrawlResponse(
        seed=result.seed,
        pages=result.pages,
        count=len(result.pages),
        depth_reached=result.depth_reached,
        failed=result.failed,
    )


@router.post("/sitemap")
async def build_sitemap(request: CrawlRequest):
    """Crawl a site and return its sitemap XML."""
    result = await _run_crawl(request)
    try:
        xml = render_sitemap(result.pages, indent=settings.SITEMAP_INDENT)
    except SitemapError as e:
        logger.error(f"Sitemap serialization failed for {request.url}: {e}")
        raise HTTPException(status_code=500, detail=f"Sitemap serialization failed: {e}")
    return Response(content=xml, media_type="application/xml")
