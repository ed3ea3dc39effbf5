"""
Sitemapper Configuration

Crawl defaults, HTTP client settings and logging level. Every value can be
overridden through environment variables; the CLI flags override these.
Invalid values fail at import with a RuntimeError naming the variable.
"""

import os

DEFAULT_SEED_URL = "https://eqmac.app/"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _int_env(name: str, default: int, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid integer for {name}: '{raw}'")
    if minimum is not None and value < minimum:
        raise RuntimeError(f"Invalid value for {name}: '{raw}' (must be >= {minimum})")
    return value


def _float_env(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid number for {name}: '{raw}'")
    if value <= 0:
        raise RuntimeError(f"Invalid value for {name}: '{raw}' (must be > 0)")
    return value


def _log_level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    if level not in LOG_LEVELS:
        raise RuntimeError(
            f"Invalid log level for {name}: '{level}'. Must be one of {', '.join(LOG_LEVELS)}"
        )
    return level


class SitemapperSettings:
    """Sitemapper configuration"""

    # Application
    APP_NAME: str = "Sitemapper"
    APP_VERSION: str = "0.1.0"

    # Crawl defaults
    SITEMAP_DEFAULT_URL: str = os.getenv("SITEMAP_DEFAULT_URL", DEFAULT_SEED_URL)
    SITEMAP_MAX_DEPTH: int = _int_env("SITEMAP_MAX_DEPTH", 3, minimum=0)
    SITEMAP_CONCURRENCY: int = _int_env("SITEMAP_CONCURRENCY", 1, minimum=1)

    # HTTP client
    SITEMAP_USER_AGENT: str = os.getenv(
        "SITEMAP_USER_AGENT", "Sitemapper/0.1 (+https://www.sitemaps.org/)"
    )
    # None keeps the aiohttp default timeout
    SITEMAP_TIMEOUT_SEC: float | None = _float_env("SITEMAP_TIMEOUT_SEC")

    # Output
    SITEMAP_INDENT: str = os.getenv("SITEMAP_INDENT", "   ")
    SITEMAP_LOG_LEVEL: str = _log_level_env("SITEMAP_LOG_LEVEL", "INFO")


settings = SitemapperSettings()
