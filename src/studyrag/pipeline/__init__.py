"""Document processing and prompt-context selection."""

from studyrag.pipeline.context import build_context, format_citations
from studyrag.pipeline.process import DocumentProcessor
from studyrag.pipeline.schemas import ContextSelection, ProcessedDocument

__all__ = [
    "ContextSelection",
    "DocumentProcessor",
    "ProcessedDocument",
    "build_context",
    "format_citations",
]
