"""
Sitemap Emitter

Serializes a list of page URLs into Sitemap Protocol 0.9 XML.
"""

import re
import xml.etree.ElementTree as ET
from typing import Iterable

from sitemapper.core.errors import SitemapError

SITEMAP_XMLNS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def build_urlset(pages: Iterable[str]) -> ET.Element:
    """Build the ``<urlset>`` element with one ``<url><loc>`` per page."""
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_XMLNS})
    for page in pages:
        if not isinstance(page, str):
            raise SitemapError(f"Page URL must be a string, got {type(page).__name__}")
        if _INVALID_XML_CHARS.search(page):
            raise SitemapError(f"URL contains characters not allowed in XML: {page!r}")
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = page
    return urlset


def render_sitemap(pages: Iterable[str], indent: str = "   ") -> str:
    """
    Render pages as a pretty-printed sitemap document.

    Args:
        pages: Page URLs, written in the given order
        indent: Indentation unit for nested elements

    Returns:
        XML text starting with the XML declaration

    Raises:
        SitemapError: a page cannot be represented in XML
    """
    urlset = build_urlset(pages)
    ET.indent(urlset, space=indent)
    return XML_HEADER + ET.tostring(urlset, encoding="unicode") + "\n"
