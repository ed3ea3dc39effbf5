"""
Crawl Request/Response Models

Pydantic models for the crawl and sitemap API endpoints.
"""

from pydantic import BaseModel, Field

from sitemapper.core.config import settings


class CrawlRequest(BaseModel):
    """Request to crawl a site from a seed URL"""

    url: str = Field(
        default=settings.SITEMAP_DEFAULT_URL,
        min_length=1,
        description="Seed URL; only links on its (post-redirect) domain are followed",
        examples=["https://example.com/"],
    )
    depth: int = Field(
        default=settings.SITEMAP_MAX_DEPTH,
        ge=0,
        description="Maximum number of link hops from the seed",
    )
    concurrency: int = Field(
        default=settings.SITEMAP_CONCURRENCY,
        ge=1,
        le=100,
        description="Maximum concurrent fetches within one depth level",
    )
    skip_errors: bool = Field(
        default=False,
        description="Skip pages that fail to fetch or parse instead of aborting",
    )


class CrawlResponse(BaseModel):
    """Pages discovered by a crawl"""

    seed: str
    pages: list[str] = Field(default_factory=list)
    count: int = Field(..., ge=0, description="Number of discovered pages")
    depth_reached: int = Field(
        ..., ge=0, description="Number of depth levels actually expanded"
    )
    failed: dict[str, str] = Field(
        default_factory=dict, description="Skipped pages and their errors"
    )
