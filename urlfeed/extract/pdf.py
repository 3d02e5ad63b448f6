"""Metadata for PDF documents, derived from the URL alone."""

from urllib.parse import unquote, urlsplit

from .models import ContentKind, ExtractedMetadata

PDF_TITLE_PREFIX = "📑"
PLACEHOLDER_FILENAME = "document.pdf"
PDF_DESCRIPTION = "A PDF File"


def extract_pdf_metadata(url: str) -> ExtractedMetadata:
    """Build metadata for a PDF from the file name in its URL path.

    Args:
        url: Resolved URL of the PDF

    Returns:
        Metadata whose title is the last path segment
    """
    path = urlsplit(url).path
    filename = unquote(path.rsplit("/", 1)[-1])
    return ExtractedMetadata(
        kind=ContentKind.PDF,
        title=filename or PLACEHOLDER_FILENAME,
        description=PDF_DESCRIPTION,
    )
