"""End-to-end processing of one URL into the feed."""

import logging
from datetime import datetime

from urlfeed.config import Settings
from urlfeed.extract import extract_metadata
from urlfeed.feed import (
    AlreadyPresent,
    FeedItem,
    FeedStore,
    MergeOutcome,
    default_collection,
    merge_item,
    synthesize_item,
)
from urlfeed.fetch import Fetcher
from urlfeed.hosts import canonicalize_url

logger = logging.getLogger(__name__)


async def item_from_url(
    url: str, settings: Settings, fetcher: Fetcher, now: datetime | None = None
) -> FeedItem:
    """Fetch ``url`` and build a feed item for it.

    Raises:
        FetchError: If the resource cannot be retrieved
        UnsupportedContentType: If the resource is neither HTML nor PDF
        ParseError: If the HTML cannot be parsed
    """
    async with fetcher.open(url) as resource:
        meta = await extract_metadata(resource, settings)
        resolved_url = resource.final_url

    canonical_url = canonicalize_url(resolved_url)
    if canonical_url != url:
        logger.debug(f"Canonicalized {url} -> {canonical_url}")

    return synthesize_item(
        meta,
        canonical_url=canonical_url,
        original_url=url,
        resolved_url=resolved_url,
        now=now,
        link_source=settings.link_source,
    )


async def add_url(
    url: str,
    settings: Settings,
    fetcher: Fetcher | None = None,
    store: FeedStore | None = None,
) -> MergeOutcome:
    """Add the item for ``url`` to the stored feed unless it is already there.

    The feed file is only written when a new item was inserted.

    Args:
        url: URL to add
        settings: Application settings
        fetcher: Fetcher to use, built from settings if omitted
        store: Feed store to use, ``settings.feed_path`` if omitted

    Returns:
        ``Inserted`` or ``AlreadyPresent``
    """
    fetcher = fetcher or Fetcher(settings)
    store = store or FeedStore(settings.feed_path)

    item = await item_from_url(url, settings, fetcher)

    collection = store.load()
    if collection is None:
        collection = default_collection(settings)
    outcome = merge_item(collection, item)

    if isinstance(outcome, AlreadyPresent):
        logger.info(
            f"Item already exists: {item.link}",
            extra={"url": url, "link": item.link, "outcome": "already_present"},
        )
        return outcome

    logger.info(
        "Adding new item: " + item.model_dump_json(by_alias=True, indent=2),
        extra={"url": url, "link": item.link},
    )
    store.save(outcome.collection)
    logger.info(
        f"Added to {store.path}",
        extra={"link": item.link, "feed_path": str(store.path), "outcome": "inserted"},
    )
    return outcome
