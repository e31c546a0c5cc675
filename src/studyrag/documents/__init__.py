"""Document loading — text extraction from uploaded files."""

from studyrag.documents.loader import DocumentLoader
from studyrag.documents.schemas import DocumentMetadata, DocumentStatus, LoadResult

__all__ = [
    "DocumentLoader",
    "DocumentMetadata",
    "DocumentStatus",
    "LoadResult",
]
