"""Context assembly for prompt builders and citation display.

Turns ranked chunks into the text block handed to the generative-AI
prompt and the chunk indices surfaced to users as sources.
"""

from __future__ import annotations

from collections.abc import Sequence

from studyrag.pipeline.schemas import ContextSelection
from studyrag.retrieval.schemas import ScoredChunk

CONTEXT_SEPARATOR = "\n\n"


def build_context(chunks: Sequence[ScoredChunk]) -> ContextSelection:
    """Join ranked chunk contents, best first, and collect their indices."""
    return ContextSelection(
        text=CONTEXT_SEPARATOR.join(c.content for c in chunks),
        chunk_indices=[c.chunk_index for c in chunks],
        chunks=list(chunks),
    )


def format_citations(chunk_indices: Sequence[int]) -> str:
    """Format chunk citations for display.

    Returns an empty string when nothing was cited.
    """
    if not chunk_indices:
        return ""
    return "Sources: " + ", ".join(f"chunk {i}" for i in chunk_indices)
