"""
Utilities package initialization
"""

from sitemapper.utils.parser import extract_hrefs, extract_links
from sitemapper.utils.urls import filter_urls, get_domain, with_prefix

__all__ = ["extract_hrefs", "extract_links", "filter_urls", "get_domain", "with_prefix"]
