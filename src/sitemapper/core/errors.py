"""
Sitemapper Errors

Exceptions raised by the crawler and sitemap emitter. Callers (CLI, API)
decide how to react; nothing here exits the process.
"""


class SitemapperError(Exception):
    """Base class for all sitemapper errors"""


class CrawlError(SitemapperError):
    """A page could not be crawled; aborts the crawl unless errors are skipped"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{url}: {message}")


class FetchError(CrawlError):
    """Transport-level failure (DNS, connection refused, timeout, bad URL)"""


class ParseError(CrawlError):
    """The HTML parser rejected the response body"""


class SitemapError(SitemapperError):
    """The page list could not be serialized to sitemap XML"""
