"""Paragraph-aware, word-bounded chunker with overlap.

Accumulates whole paragraphs up to a word budget, carries the tail of each
closed chunk into the next one, and slides a word window over paragraphs
that are too large to fit on their own.
"""

from __future__ import annotations

import logging

from studyrag.chunking.base import BaseChunker
from studyrag.chunking.normalize import normalize_text, split_paragraphs
from studyrag.chunking.schemas import Chunk, NormalizationMode

logger = logging.getLogger(__name__)

TARGET_SIZE = 500
OVERLAP = 50

PARAGRAPH_JOINER = "\n\n"


def _check_sizes(target_size: int, overlap: int) -> None:
    if target_size <= 0:
        raise ValueError(f"target_size must be positive, got {target_size}")
    if overlap < 0:
        raise ValueError(f"overlap must be non-negative, got {overlap}")
    if overlap >= target_size:
        raise ValueError(
            f"overlap ({overlap}) must be smaller than target_size ({target_size})"
        )


def sliding_windows(words: list[str], target_size: int, overlap: int) -> list[str]:
    """Join ``target_size``-word windows taken every ``target_size - overlap`` words.

    Stops at the first window that reaches the end of ``words``.
    """
    stride = target_size - overlap
    windows: list[str] = []
    for start in range(0, len(words), stride):
        windows.append(" ".join(words[start:start + target_size]))
        if start + target_size >= len(words):
            break
    return windows


class ParagraphChunker(BaseChunker):
    """Chunker that keeps paragraphs together where the word budget allows."""

    def __init__(
        self,
        target_size: int = TARGET_SIZE,
        overlap: int = OVERLAP,
        mode: NormalizationMode = NormalizationMode.PRESERVE_PARAGRAPHS,
    ):
        _check_sizes(target_size, overlap)
        self.target_size = target_size
        self.overlap = overlap
        self.mode = NormalizationMode(mode)

    def chunk(self, text: str) -> list[Chunk]:
        if not text or not text.strip():
            return []

        cleaned = normalize_text(text, self.mode)
        contents: list[str] = []
        current: list[str] = []
        current_words = 0

        for para in split_paragraphs(cleaned):
            para_words = para.split()

            # Oversized paragraph: flush, then window over it
            if len(para_words) > self.target_size:
                if current:
                    contents.append(PARAGRAPH_JOINER.join(current))
                    current = []
                    current_words = 0
                contents.extend(
                    sliding_windows(para_words, self.target_size, self.overlap)
                )
                continue

            if current and current_words + len(para_words) > self.target_size:
                contents.append(PARAGRAPH_JOINER.join(current))
                tail = self._overlap_tail(current)
                current = [tail, para] if tail else [para]
                current_words = len(tail.split()) + len(para_words)
            else:
                current.append(para)
                current_words += len(para_words)

        if current:
            contents.append(PARAGRAPH_JOINER.join(current))

        if not contents and cleaned:
            logger.debug("No paragraphs found, falling back to word windows")
            contents = sliding_windows(cleaned.split(), self.target_size, self.overlap)

        chunks = [
            Chunk(content=content, chunk_index=i, page_number=0)
            for i, content in enumerate(contents)
        ]

        logger.info(
            "ParagraphChunker produced %d chunks from %d chars (size=%d, overlap=%d)",
            len(chunks), len(cleaned), self.target_size, self.overlap,
        )
        return chunks

    def _overlap_tail(self, paragraphs: list[str]) -> str:
        """Last ``overlap`` words of the closed chunk as one pseudo-paragraph."""
        if self.overlap == 0:
            return ""
        words = " ".join(paragraphs).split()
        return " ".join(words[-min(self.overlap, len(words)):])


def chunk_text(
    text: str,
    target_size: int = TARGET_SIZE,
    overlap: int = OVERLAP,
    mode: NormalizationMode = NormalizationMode.PRESERVE_PARAGRAPHS,
) -> list[Chunk]:
    """Split ``text`` into overlapping, word-bounded chunks.

    Args:
        text: Extracted document text. Empty or whitespace-only text
            yields an empty list.
        target_size: Maximum words per chunk, not counting the overlap
            prefix carried into non-initial paragraph chunks.
        overlap: Words repeated between adjacent chunks.
        mode: Whether single line breaks delimit paragraphs.

    Raises:
        ValueError: If ``target_size <= 0`` or ``overlap`` is negative or
            not smaller than ``target_size``.
    """
    return ParagraphChunker(target_size=target_size, overlap=overlap, mode=mode).chunk(text)
