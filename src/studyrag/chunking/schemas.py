"""Data models for chunks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class NormalizationMode(StrEnum):
    """How line breaks are treated before paragraph splitting."""

    PRESERVE_PARAGRAPHS = "preserve_paragraphs"
    COLLAPSE_ALL = "collapse_all"


@dataclass(frozen=True)
class Chunk:
    """A single retrievable piece of a document.

    Attributes:
        content: Chunk text, never empty after trimming.
        chunk_index: Position within the document's chunk sequence (0-based,
            contiguous). Surfaced to users as the citation id.
        page_number: Page-of-origin placeholder. Always 0, since page boundaries
            are not tracked through chunking.
    """

    content: str
    chunk_index: int = 0
    page_number: int = 0

    @property
    def word_count(self) -> int:
        return len(self.content.split())

    def to_record(self) -> dict:
        """Serialize using the field names the document store persists."""
        return {
            "content": self.content,
            "chunkIndex": self.chunk_index,
            "pageNumber": self.page_number,
        }

    @classmethod
    def from_record(cls, record: dict) -> Chunk:
        return cls(
            content=record["content"],
            chunk_index=int(record.get("chunkIndex", 0)),
            page_number=int(record.get("pageNumber") or 0),
        )
