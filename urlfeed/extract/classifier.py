"""Dispatch from declared content type to a metadata extractor."""

import logging

from urlfeed.config import Settings
from urlfeed.errors import UnsupportedContentType
from urlfeed.fetch import FetchedResource

from .html import extract_html_metadata
from .models import ContentKind, ExtractedMetadata
from .pdf import extract_pdf_metadata

logger = logging.getLogger(__name__)


def classify(content_type: str | None, url: str | None = None) -> ContentKind:
    """Map a Content-Type header value to the extractor that handles it.

    Raises:
        UnsupportedContentType: For anything other than HTML or PDF
    """
    lowered = (content_type or "").lower()
    if "application/pdf" in lowered:
        return ContentKind.PDF
    if "text/html" in lowered:
        return ContentKind.HTML
    raise UnsupportedContentType(lowered, url)


async def extract_metadata(resource: FetchedResource, settings: Settings) -> ExtractedMetadata:
    """Extract metadata from a fetched resource according to its content type.

    PDF metadata comes from the URL, so the body is only read for HTML.
    """
    kind = classify(resource.content_type, resource.final_url)
    logger.debug(f"Classified {resource.final_url} as {kind.value}")

    if kind is ContentKind.PDF:
        return extract_pdf_metadata(resource.final_url)

    body = await resource.read()
    return extract_html_metadata(
        body,
        resource.final_url,
        charset=resource.charset,
        max_depth=settings.max_html_depth,
    )
