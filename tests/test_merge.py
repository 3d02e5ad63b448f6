"""Tests for merging items into the feed."""

import pytest

from urlfeed.config import Settings
from urlfeed.feed import (
    AlreadyPresent,
    FeedCollection,
    FeedItem,
    Inserted,
    default_collection,
    merge_item,
)


def make_item(link: str, title: str = "Title") -> FeedItem:
    """Helper to create a FeedItem for testing."""
    return FeedItem(
        title=title,
        link=link,
        description="Description",
        pub_date="Mon, 15 Jan 2024 10:30:00 +0000",
        guid=link,
    )


@pytest.fixture
def collection():
    return FeedCollection(
        title="Feed",
        link="http://localhost",
        description="Test feed",
        items=[make_item("https://example.com/b"), make_item("https://example.com/a")],
    )


def test_new_item_is_prepended(collection):
    item = make_item("https://example.com/c")

    outcome = merge_item(collection, item)

    assert isinstance(outcome, Inserted)
    assert [i.link for i in outcome.collection.items] == [
        "https://example.com/c",
        "https://example.com/b",
        "https://example.com/a",
    ]
    assert outcome.item is item


def test_input_collection_not_mutated(collection):
    merge_item(collection, make_item("https://example.com/c"))

    assert len(collection.items) == 2


def test_existing_link_is_already_present(collection):
    outcome = merge_item(collection, make_item("https://example.com/a", title="Other"))

    assert isinstance(outcome, AlreadyPresent)
    assert outcome.existing.title == "Title"


def test_comparison_is_exact(collection):
    """Links that differ in any character are different items."""
    outcome = merge_item(collection, make_item("https://example.com/a/"))

    assert isinstance(outcome, Inserted)


def test_merge_is_idempotent():
    feed = FeedCollection(title="Feed", link="http://localhost", description="d")
    item = make_item("https://youtube.com/watch?v=X")

    first = merge_item(feed, item)
    assert isinstance(first, Inserted)

    second = merge_item(first.collection, make_item("https://youtube.com/watch?v=X"))
    assert isinstance(second, AlreadyPresent)
    assert len(first.collection.items) == 1


def test_default_collection_from_settings():
    settings = Settings(
        _env_file=None, title="Reading", link="https://feeds.example.com", description="Mine"
    )

    feed = default_collection(settings)

    assert feed.title == "Reading"
    assert feed.link == "https://feeds.example.com"
    assert feed.description == "Mine"
    assert feed.version == "2.0"
    assert feed.items == []
