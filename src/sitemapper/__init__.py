"""
sitemapper

Breadth-first same-domain crawler that emits Sitemap Protocol 0.9 XML.
"""

from sitemapper.services.crawler import CrawlResult, CrawlSession, crawl
from sitemapper.services.sitemap import render_sitemap

__version__ = "0.1.0"

__all__ = ["CrawlResult", "CrawlSession", "crawl", "render_sitemap", "__version__"]
