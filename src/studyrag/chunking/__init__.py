"""Paragraph-aware document chunking."""

from studyrag.chunking.base import BaseChunker
from studyrag.chunking.normalize import normalize_text, split_paragraphs
from studyrag.chunking.paragraph_chunker import ParagraphChunker, chunk_text
from studyrag.chunking.schemas import Chunk, NormalizationMode

__all__ = [
    "BaseChunker",
    "Chunk",
    "NormalizationMode",
    "ParagraphChunker",
    "chunk_text",
    "normalize_text",
    "split_paragraphs",
]
