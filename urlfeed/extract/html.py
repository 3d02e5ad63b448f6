"""Title and description discovery in HTML documents."""

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from urlfeed.errors import ParseError
from urlfeed.hosts import canonicalize_url, simple_host, title_from_url

from .models import ContentKind, ExtractedMetadata

logger = logging.getLogger(__name__)

DESCRIPTION_KEYS = ("description", "og:description")


def _title_text(node: Tag) -> str:
    """Return the whitespace-collapsed first text child of a <title>."""
    if not node.contents:
        return ""
    first = node.contents[0]
    if not isinstance(first, NavigableString) or isinstance(first, PreformattedString):
        return ""
    return " ".join(first.split())


def _meta_description(node: Tag) -> str:
    """Return the content of a description <meta>, or an empty string.

    ``name`` is checked before ``property``.
    """
    content = node.get("content")
    if not isinstance(content, str) or not content.strip():
        return ""
    for attr in ("name", "property"):
        value = node.get(attr)
        if isinstance(value, str) and value.strip().lower() in DESCRIPTION_KEYS:
            return content.strip()
    return ""


def iter_elements(root: Tag, max_depth: int = 256) -> Iterator[Tag]:
    """Yield elements depth-first in document order, using an explicit stack.

    Children are only expanded when the consumer asks for the next element,
    so stopping the iteration stops the walk. Elements deeper than
    ``max_depth`` are yielded but not descended into.
    """
    stack: list[tuple[Tag, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node

        if depth >= max_depth:
            continue
        children = [child for child in node.contents if isinstance(child, Tag)]
        stack.extend((child, depth + 1) for child in reversed(children))


def traverse_document(root: Tag, max_depth: int = 256) -> tuple[str, str]:
    """Walk the tree depth-first, pre-order, collecting title and description.

    The first qualifying ``<title>`` and the first qualifying description
    ``<meta>`` win. The walk stops once both are found; elements deeper than
    ``max_depth`` are not descended into.

    Returns:
        ``(title, description)``, either of which may be empty
    """
    title = description = ""

    for node in iter_elements(root, max_depth):
        if node.name == "title" and not title:
            title = _title_text(node)
        elif node.name == "meta" and not description:
            description = _meta_description(node)

        if title and description:
            break

    return title, description


def parse_document(body: bytes, url: str, charset: str | None = None) -> BeautifulSoup:
    """Parse an HTML body into a tree.

    Raises:
        ParseError: If the parser rejects the markup
    """
    try:
        return BeautifulSoup(body, "html.parser", from_encoding=charset)
    except (ParserRejectedMarkup, AssertionError) as exc:
        raise ParseError(url, str(exc) or type(exc).__name__) from exc


def extract_html_metadata(
    body: bytes, url: str, charset: str | None = None, max_depth: int = 256
) -> ExtractedMetadata:
    """Extract a title and description from an HTML document.

    Missing titles fall back to one derived from the URL shape, then to the
    host name. A missing description falls back to the URL itself.

    Args:
        body: Raw document bytes
        url: Resolved URL of the document
        charset: Charset declared by the response, if any
        max_depth: Deepest element level the walk descends into

    Returns:
        Undecorated metadata for the document
    """
    soup = parse_document(body, url, charset)
    title, description = traverse_document(soup, max_depth)

    if not title:
        title = title_from_url(canonicalize_url(url)) or simple_host(url)
        logger.debug(f"No <title> in {url}, using {title!r}")
    if not description:
        description = url

    return ExtractedMetadata(kind=ContentKind.HTML, title=title, description=description)
