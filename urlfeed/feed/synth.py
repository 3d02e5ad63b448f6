"""Assembly of a feed item from extracted metadata."""

from datetime import datetime
from email.utils import format_datetime
from html import escape
from urllib.parse import urlsplit

from urlfeed.extract.models import ContentKind, ExtractedMetadata
from urlfeed.extract.pdf import PDF_TITLE_PREFIX
from urlfeed.hosts import lookup_rule, registrable_domain, simple_host

from .models import FeedItem


def decorate_title(meta: ExtractedMetadata, url: str) -> str:
    """Prefix the title with the PDF marker or the host's label."""
    if meta.kind is ContentKind.PDF:
        prefix = PDF_TITLE_PREFIX
    else:
        hostname = urlsplit(url).hostname or ""
        rule = lookup_rule(registrable_domain(hostname)) if hostname else None
        prefix = rule.prefix if rule else None

    if not prefix:
        return meta.title
    return f"{prefix} {meta.title}"


def source_anchor(original_url: str, label: str) -> str:
    """Render an HTML link back to the URL the item was created from."""
    return f'<a href="{escape(original_url)}">{escape(label)}</a>'


def synthesize_item(
    meta: ExtractedMetadata,
    canonical_url: str,
    original_url: str,
    resolved_url: str,
    now: datetime | None = None,
    link_source: bool = True,
) -> FeedItem:
    """Combine metadata and URLs into a feed item.

    Args:
        meta: Extracted metadata for the resource
        canonical_url: Canonical URL, used as both link and guid
        original_url: URL as given by the user
        resolved_url: URL after redirects, labels the source link
        now: Publication time, defaults to the current local time
        link_source: Whether to prefix the description with a source link

    Returns:
        A new FeedItem
    """
    now = now or datetime.now().astimezone()

    description = meta.description
    if link_source:
        anchor = source_anchor(original_url, simple_host(resolved_url))
        description = f"{anchor} - {description}"

    return FeedItem(
        title=decorate_title(meta, resolved_url),
        link=canonical_url,
        description=description,
        pub_date=format_datetime(now),
        guid=canonical_url,
        original_url=original_url,
    )
