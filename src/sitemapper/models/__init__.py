"""
Models package initialization
"""

from sitemapper.models.crawl import CrawlRequest, CrawlResponse

__all__ = ["CrawlRequest", "CrawlResponse"]
