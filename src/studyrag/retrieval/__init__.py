"""Retrieval — keyword scoring and top-k chunk selection."""

from studyrag.retrieval.ranker import (
    extract_keywords,
    find_relevant,
    find_relevant_multi,
    score_chunk,
)
from studyrag.retrieval.schemas import RankerConfig, ScoredChunk
from studyrag.retrieval.stopwords import DEFAULT_STOP_WORDS

__all__ = [
    "DEFAULT_STOP_WORDS",
    "RankerConfig",
    "ScoredChunk",
    "extract_keywords",
    "find_relevant",
    "find_relevant_multi",
    "score_chunk",
]
