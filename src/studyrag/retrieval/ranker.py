"""Keyword relevance ranking over a document's chunks.

Scoring rules, per chunk at position ``i`` of ``N``:
    +occurrence_weight  per whole-word occurrence of each keyword
    +coverage_weight    per distinct keyword present, when more than one is
    / sqrt(word count)  so long chunks do not win on size alone
    * (1 - i/N * position_decay)  small boost for earlier chunks
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence

from studyrag.chunking.schemas import Chunk
from studyrag.retrieval.schemas import RankerConfig, ScoredChunk

logger = logging.getLogger(__name__)

MAX_RESULTS = 3

_EDGE_PUNCTUATION = re.compile(r"^\W+|\W+$")


def extract_keywords(query: str, config: RankerConfig | None = None) -> list[str]:
    """Lowercase, split on whitespace, and drop short tokens and stop words.

    Punctuation at either end of a token is removed before the length and
    stop-word filters, so ``"learning?"`` becomes ``"learning"``, ``"ai."``
    is dropped as too short and ``"the?"`` is caught as a stop word. Duplicates
    are kept only once, in first-seen order.
    """
    cfg = config or RankerConfig()
    keywords: list[str] = []
    for token in query.lower().split():
        token = _EDGE_PUNCTUATION.sub("", token)
        if len(token) < cfg.min_keyword_length or token in cfg.stop_words:
            continue
        if token not in keywords:
            keywords.append(token)
    return keywords


def _whole_word_patterns(keywords: Sequence[str]) -> list[re.Pattern[str]]:
    return [re.compile(rf"\b{re.escape(kw)}\b") for kw in keywords]


def score_chunk(
    content: str,
    keywords: Sequence[str],
    position: int,
    total: int,
    config: RankerConfig | None = None,
    patterns: Sequence[re.Pattern[str]] | None = None,
) -> tuple[float, int]:
    """Score one chunk's content against query keywords.

    Returns:
        ``(final_score, unique_matched)``.
    """
    cfg = config or RankerConfig()
    patterns = patterns if patterns is not None else _whole_word_patterns(keywords)
    lowered = content.lower()

    raw = 0.0
    for pattern in patterns:
        raw += cfg.occurrence_weight * len(pattern.findall(lowered))

    # Presence is a plain substring check, looser than the counting above
    unique_matched = sum(1 for kw in keywords if kw in lowered)
    if unique_matched > 1:
        raw += cfg.coverage_weight * unique_matched

    word_count = max(len(lowered.split()), 1)
    normalized = raw / math.sqrt(word_count)
    position_factor = 1 - (position / total) * cfg.position_decay if total else 1.0
    return normalized * position_factor, unique_matched


def find_relevant(
    chunks: Sequence[Chunk],
    query: str,
    max_results: int = MAX_RESULTS,
    config: RankerConfig | None = None,
) -> list[ScoredChunk]:
    """Return the ``max_results`` chunks most relevant to ``query``, best first.

    Chunks with a zero score are dropped. Ties on score are broken by more
    distinct keywords matched, then by lower ``chunk_index``.

    Query tokens are split on whitespace and then lose any edge punctuation
    before filtering (see ``extract_keywords``), so ``"ai."`` never becomes a
    keyword. A query with no usable keywords, whitespace-only included,
    returns the first ``max_results`` chunks unscored (``score == 0``) in
    their original order.
    """
    if not chunks or not query or max_results <= 0:
        return []

    cfg = config or RankerConfig()
    keywords = extract_keywords(query, cfg)

    if not keywords:
        logger.debug("Query %r has no keywords, returning leading chunks", query)
        return [ScoredChunk.from_chunk(c) for c in chunks[:max_results]]

    patterns = _whole_word_patterns(keywords)
    total = len(chunks)
    scored: list[ScoredChunk] = []
    for i, chunk in enumerate(chunks):
        score, unique_matched = score_chunk(
            chunk.content, keywords, i, total, cfg, patterns=patterns,
        )
        if score > 0:
            scored.append(ScoredChunk.from_chunk(chunk, score, unique_matched))

    scored.sort(key=lambda c: (-c.score, -c.matched_word_count, c.chunk_index))
    results = scored[:max_results]

    logger.info(
        "Ranked %d chunks for %d keywords: %d matched, returning %d",
        total, len(keywords), len(scored), len(results),
    )
    return results


def find_relevant_multi(
    chunks: Sequence[Chunk],
    queries: Sequence[str],
    results_per_query: int = 2,
    max_results: int = 5,
    config: RankerConfig | None = None,
) -> list[ScoredChunk]:
    """Rank chunks for several phrasings of one question and merge the hits.

    Results are concatenated in query order and de-duplicated by
    ``chunk_index``. A chunk keeps the position of its first hit, but a
    later query's hit replaces its score and matched-word count.
    """
    merged: dict[int, ScoredChunk] = {}
    for query in queries:
        for hit in find_relevant(chunks, query, results_per_query, config):
            merged[hit.chunk_index] = hit

    return list(merged.values())[:max_results]
