"""Deduplicating merge of a new item into the feed."""

from pydantic import BaseModel

from urlfeed.config import Settings

from .models import FeedCollection, FeedItem


class Inserted(BaseModel):
    """The item was new; ``collection`` has it prepended and must be saved."""

    collection: FeedCollection
    item: FeedItem


class AlreadyPresent(BaseModel):
    """An item with the same link is already stored. Nothing to do."""

    existing: FeedItem


MergeOutcome = Inserted | AlreadyPresent


def default_collection(settings: Settings) -> FeedCollection:
    """Build the empty channel used when no feed file exists yet."""
    return FeedCollection(
        title=settings.title,
        link=settings.link,
        description=settings.description,
    )


def merge_item(collection: FeedCollection, item: FeedItem) -> MergeOutcome:
    """Prepend ``item`` unless an item with the same link already exists.

    The input collection is left unchanged. Merging the same link twice
    inserts once and reports ``AlreadyPresent`` afterwards.

    Args:
        collection: Currently persisted feed
        item: Newly synthesized item

    Returns:
        ``Inserted`` with the updated collection, or ``AlreadyPresent``
    """
    existing = collection.find(item.link)
    if existing is not None:
        return AlreadyPresent(existing=existing)

    updated = collection.model_copy(update={"items": [item, *collection.items]})
    return Inserted(collection=updated, item=item)
