"""Pydantic models for extracted document metadata."""

from enum import Enum

from pydantic import BaseModel


class ContentKind(str, Enum):
    """Content types with a metadata extractor."""

    HTML = "html"
    PDF = "pdf"


class ExtractedMetadata(BaseModel):
    """Title and description of a fetched resource, before decoration."""

    kind: ContentKind
    title: str
    description: str
