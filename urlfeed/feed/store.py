"""RSS 2.0 file storage for the feed."""

import logging
import os
import re
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import ValidationError

from urlfeed.errors import PersistenceError

from .models import FeedCollection, FeedItem

logger = logging.getLogger(__name__)

# Item children in the order they are written
ITEM_FIELDS = ("title", "link", "description", "pubDate", "guid", "originalUrl", "author")
OPTIONAL_ITEM_FIELDS = frozenset({"originalUrl", "author"})
REQUIRED_ITEM_FIELDS = frozenset({"link", "guid"})

# Characters outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _text(parent: ET.Element, tag: str) -> str | None:
    """Return the text of a child element, or None if the child is missing."""
    child = parent.find(tag)
    if child is None:
        return None
    return child.text or ""


def _parse_item(element: ET.Element) -> FeedItem:
    """Build a FeedItem from an <item> element.

    Raises:
        ValueError: If <link> or <guid> is missing or empty
    """
    values = {}
    for tag in ITEM_FIELDS:
        text = _text(element, tag)
        if tag in REQUIRED_ITEM_FIELDS and not text:
            raise ValueError(f"<item> without <{tag}>")
        if text is None and tag in OPTIONAL_ITEM_FIELDS:
            continue
        values[tag] = text or ""
    return FeedItem.model_validate(values)


def parse_feed(data: bytes) -> FeedCollection:
    """Parse an RSS 2.0 document into a collection.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is not well-formed
        ValueError: If the document is not an RSS feed
    """
    root = ET.fromstring(data)
    if root.tag != "rss":
        raise ValueError(f"expected <rss> root element, found <{root.tag}>")

    channel = root.find("channel")
    if channel is None:
        raise ValueError("missing <channel> element")

    return FeedCollection(
        title=_text(channel, "title") or "",
        link=_text(channel, "link") or "",
        description=_text(channel, "description") or "",
        version=root.get("version", "2.0"),
        items=[_parse_item(element) for element in channel.findall("item")],
    )


def _xml_safe(text: str) -> str:
    """Replace characters XML 1.0 cannot represent with U+FFFD."""
    return _ILLEGAL_XML_CHARS.sub("\ufffd", text)


def render_feed(collection: FeedCollection) -> bytes:
    """Serialize a collection as an indented RSS 2.0 document."""
    root = ET.Element("rss", version=collection.version)
    channel = ET.SubElement(root, "channel")
    ET.SubElement(channel, "title").text = _xml_safe(collection.title)
    ET.SubElement(channel, "link").text = _xml_safe(collection.link)
    ET.SubElement(channel, "description").text = _xml_safe(collection.description)

    for item in collection.items:
        element = ET.SubElement(channel, "item")
        values = item.model_dump(by_alias=True)
        for tag in ITEM_FIELDS:
            if values.get(tag) is None:
                continue
            ET.SubElement(element, tag).text = _xml_safe(values[tag])

    ET.indent(root, space="  ")
    return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"


class FeedStore:
    """Reads and writes the feed as an RSS file on the local filesystem."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> FeedCollection | None:
        """Load the stored feed.

        Returns:
            The collection, or None if the file does not exist

        Raises:
            PersistenceError: If the file cannot be read or parsed
        """
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.info(f"No feed at {self.path}, starting a new one")
            return None
        except OSError as exc:
            raise PersistenceError("read", str(self.path), str(exc)) from exc

        try:
            return parse_feed(data)
        except (ET.ParseError, ValueError, ValidationError) as exc:
            raise PersistenceError("read", str(self.path), str(exc)) from exc

    def save(self, collection: FeedCollection) -> None:
        """Write the whole feed, replacing the file atomically.

        Raises:
            PersistenceError: If the file cannot be written
        """
        data = render_feed(collection)
        directory = self.path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "wb") as fh:
                    fh.write(data)
                os.chmod(tmp_name, 0o644)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError("write", str(self.path), str(exc)) from exc

        logger.info(f"Saved {len(collection.items)} items to {self.path}")
