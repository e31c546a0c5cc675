"""Data models for document loading and processing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class DocumentStatus(StrEnum):
    """Processing state of an uploaded document."""

    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class DocumentMetadata:
    """Descriptive metadata read from the source file, when available."""

    title: str = ""
    author: str = ""
    subject: str = ""


@dataclass
class LoadResult:
    """Result of loading a single document file.

    Attributes:
        text: Full extracted text.
        page_texts: Per-page text (for PDFs).
        source_path: Filesystem path or upload filename.
        format: File extension used (pdf, txt).
        page_count: Number of pages.
        char_count: Length of ``text``.
        metadata: Title/author/subject from the file.
        warnings: Non-fatal issues encountered during loading.
    """

    text: str
    page_texts: list[str] = field(default_factory=list)
    source_path: str | None = None
    format: str = ""
    page_count: int | None = None
    char_count: int = 0
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    warnings: list[str] = field(default_factory=list)
