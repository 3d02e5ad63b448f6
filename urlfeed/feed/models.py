"""Pydantic models for the persisted feed."""

from pydantic import BaseModel, ConfigDict, Field


class FeedItem(BaseModel):
    """A single entry of the feed. ``link`` is its identity."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    link: str
    description: str
    pub_date: str = Field(alias="pubDate")
    guid: str
    original_url: str | None = Field(default=None, alias="originalUrl")
    author: str | None = None


class FeedCollection(BaseModel):
    """An RSS channel and its items, newest first."""

    title: str
    link: str
    description: str
    version: str = "2.0"
    items: list[FeedItem] = Field(default_factory=list)

    def find(self, link: str) -> FeedItem | None:
        """Return the item whose link equals ``link`` exactly, if any."""
        for item in self.items:
            if item.link == link:
                return item
        return None
