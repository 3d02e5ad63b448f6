"""urlfeed - command line entry point."""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from urlfeed import __version__
from urlfeed.config import get_settings
from urlfeed.errors import UrlFeedError
from urlfeed.logging import setup_logging
from urlfeed.pipeline import add_url

logger = logging.getLogger("urlfeed")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="urlfeed",
        description="Add the page or PDF behind a URL to an RSS feed file.",
    )
    parser.add_argument("url", help="URL to add to the feed")
    parser.add_argument(
        "--feed",
        metavar="PATH",
        help="feed file to update (default: $RSS_FEED_PATH or rss.xml)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for running the command line tool."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    if args.feed:
        settings = settings.model_copy(update={"feed_path": args.feed})
    setup_logging(settings)

    try:
        asyncio.run(add_url(args.url, settings))
    except UrlFeedError as exc:
        logger.debug("Failed to add URL", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
