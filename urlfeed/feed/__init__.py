"""Feed items, synthesis, merging and persistence."""

from .merge import AlreadyPresent, Inserted, MergeOutcome, default_collection, merge_item
from .models import FeedCollection, FeedItem
from .store import FeedStore
from .synth import decorate_title, synthesize_item

__all__ = [
    "AlreadyPresent",
    "FeedCollection",
    "FeedItem",
    "FeedStore",
    "Inserted",
    "MergeOutcome",
    "decorate_title",
    "default_collection",
    "merge_item",
    "synthesize_item",
]
