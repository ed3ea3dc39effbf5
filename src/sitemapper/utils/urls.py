"""
URL Utilities

Domain prefix extraction and same-domain filtering. URLs are compared as
plain strings; nothing is normalized.
"""

from typing import Callable, Iterable
from urllib.parse import urlsplit


def get_domain(url: str) -> str:
    """
    Return the ``scheme://host`` prefix of a URL.

    The port stays part of the host; credentials, path, query and fragment
    are dropped.

    >>> get_domain("https://user:pw@example.com:8443/a?b=c#d")
    'https://example.com:8443'
    """
    parts = urlsplit(url)
    host = parts.netloc.rpartition("@")[2]
    return f"{parts.scheme}://{host}"


def with_prefix(prefix: str) -> Callable[[str], bool]:
    """Build a predicate keeping links that start with ``prefix``."""

    def keep(link: str) -> bool:
        return link.startswith(prefix)

    return keep


def filter_urls(links: Iterable[str], keep: Callable[[str], bool]) -> list[str]:
    """Return the links accepted by ``keep``, in their original order."""
    return [link for link in links if keep(link)]
