"""Data models for lexical retrieval."""

from __future__ import annotations

from dataclasses import dataclass, field

from studyrag.chunking.schemas import Chunk
from studyrag.retrieval.stopwords import DEFAULT_STOP_WORDS


@dataclass(frozen=True)
class RankerConfig:
    """Scoring weights and filters for keyword ranking.

    Attributes:
        occurrence_weight: Points per whole-word keyword occurrence.
        coverage_weight: Points per distinct keyword, applied only when
            more than one distinct keyword is present.
        position_decay: Largest relative penalty, given to the last chunk
            of a document. Must stay in ``[0, 1)``.
        min_keyword_length: Query tokens shorter than this are dropped.
        stop_words: Lowercase tokens never used as keywords.
    """

    occurrence_weight: float = 3.0
    coverage_weight: float = 2.0
    position_decay: float = 0.1
    min_keyword_length: int = 3
    stop_words: frozenset[str] = field(default=DEFAULT_STOP_WORDS)

    def __post_init__(self) -> None:
        if self.occurrence_weight < 0 or self.coverage_weight < 0:
            raise ValueError("Scoring weights must be non-negative")
        if not 0 <= self.position_decay < 1:
            raise ValueError(
                f"position_decay must be in [0, 1), got {self.position_decay}"
            )
        if self.min_keyword_length < 1:
            raise ValueError(
                f"min_keyword_length must be at least 1, got {self.min_keyword_length}"
            )


@dataclass(frozen=True)
class ScoredChunk(Chunk):
    """A chunk annotated with its relevance to one query."""

    score: float = 0.0
    matched_word_count: int = 0

    @classmethod
    def from_chunk(
        cls,
        chunk: Chunk,
        score: float = 0.0,
        matched_word_count: int = 0,
    ) -> ScoredChunk:
        return cls(
            content=chunk.content,
            chunk_index=chunk.chunk_index,
            page_number=chunk.page_number,
            score=score,
            matched_word_count=matched_word_count,
        )
