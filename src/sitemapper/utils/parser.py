"""
HTML Parser Utilities

Functions for extracting anchor links from HTML.
"""

import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup

warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


class HTMLParseError(ValueError):
    """Raised when BeautifulSoup cannot build a tree from the markup"""


def extract_hrefs(html: str | bytes) -> list[str]:
    """
    Return every anchor href in document order.

    Args:
        html: Raw HTML, as text or undecoded bytes

    Returns:
        List of href attribute values, duplicates included
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise HTMLParseError(str(e)) from e

    hrefs = []
    for a in soup.find_all("a", href=True):
        href = a.get("href")
        if isinstance(href, list):
            href = href[0] if href else None
        if href is not None:
            hrefs.append(href)
    return hrefs


def extract_links(base: str, html: str | bytes) -> list[str]:
    """
    Extract crawlable links from HTML.

    Site-relative hrefs (``/path``) are qualified with ``base``; hrefs
    starting with ``http`` are kept as they are. Everything else
    (``mailto:``, ``#fragment``, ``page.html``, ...) is dropped.

    Args:
        base: Domain prefix (``scheme://host``) of the page
        html: Raw HTML

    Returns:
        List of absolute URLs, not deduplicated
    """
    links = []
    for href in extract_hrefs(html):
        if href.startswith("/"):
            links.append(base + href)
        elif href.startswith("http"):
            links.append(href)
    return links
