"""Content-type specific metadata extraction."""

from .classifier import classify, extract_metadata
from .html import extract_html_metadata, traverse_document
from .models import ContentKind, ExtractedMetadata
from .pdf import extract_pdf_metadata

__all__ = [
    "ContentKind",
    "ExtractedMetadata",
    "classify",
    "extract_html_metadata",
    "extract_metadata",
    "extract_pdf_metadata",
    "traverse_document",
]
