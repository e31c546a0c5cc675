"""Data models for the document processing and context pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from studyrag.chunking.schemas import Chunk
from studyrag.documents.schemas import DocumentMetadata, DocumentStatus
from studyrag.retrieval.schemas import ScoredChunk


@dataclass
class ProcessedDocument:
    """Outcome of turning one uploaded file into a chunk sequence."""

    source: str
    status: DocumentStatus = DocumentStatus.PROCESSING
    extracted_text: str = ""
    chunks: list[Chunk] = field(default_factory=list)
    page_count: int | None = None
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.status == DocumentStatus.READY


@dataclass
class ContextSelection:
    """Chunks chosen for a prompt, plus the citations shown to the user."""

    text: str
    chunk_indices: list[int] = field(default_factory=list)
    chunks: list[ScoredChunk] = field(default_factory=list)
