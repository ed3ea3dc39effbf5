"""
Sitemapper CLI

Crawls a site from a seed URL and writes its sitemap XML to stdout (or a
file). Progress goes to stderr through logging, so stdout can be
redirected straight into a sitemap.xml.
"""

import argparse
import asyncio
import logging
import sys

from sitemapper.core.config import LOG_LEVELS, settings
from sitemapper.core.errors import CrawlError, SitemapError
from sitemapper.services.crawler import crawl
from sitemapper.services.sitemap import render_sitemap

logger = logging.getLogger("sitemapper")


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitemapper",
        description="Build a sitemap of all same-domain pages reachable from a URL",
    )
    parser.add_argument(
        "--url",
        default=settings.SITEMAP_DEFAULT_URL,
        help="Domain URL for sitemap creation",
    )
    parser.add_argument(
        "--depth",
        type=_non_negative_int,
        default=settings.SITEMAP_MAX_DEPTH,
        help="Max number of links deep to traverse",
    )
    parser.add_argument(
        "-c",
        "--concurrency",
        type=_positive_int,
        default=settings.SITEMAP_CONCURRENCY,
        help="Max concurrent fetches per depth level",
    )
    parser.add_argument(
        "-o", "--output", help="Write the sitemap to this file instead of stdout"
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Skip pages that fail to fetch or parse instead of aborting",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.SITEMAP_TIMEOUT_SEC,
        help="Total per-request timeout in seconds",
    )
    parser.add_argument(
        "--user-agent", default=settings.SITEMAP_USER_AGENT, help="User-Agent header"
    )
    parser.add_argument(
        "--indent", default=settings.SITEMAP_INDENT, help="XML indentation unit"
    )
    parser.add_argument(
        "--log-level",
        default=settings.SITEMAP_LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level for progress output on stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = asyncio.run(
            crawl(
                args.url,
                max_depth=args.depth,
                concurrency=args.concurrency,
                skip_errors=args.skip_errors,
                user_agent=args.user_agent,
                timeout=args.timeout,
            )
        )
    except CrawlError as e:
        logger.error(f"ERROR: {e}")
        return 1

    if result.failed:
        logger.warning(f"{len(result.failed)} pages skipped because of errors")

    try:
        xml = render_sitemap(result.pages, indent=args.indent)
    except SitemapError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(xml)
        except OSError as e:
            print(f"error: cannot write {args.output}: {e}", file=sys.stderr)
            return 1
        logger.info(f"Sitemap with {len(result.pages)} URLs written to {args.output}")
    else:
        sys.stdout.write(xml)
    return 0


if __name__ == "__main__":
    sys.exit(main())
