"""Abstract base class for chunkers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from studyrag.chunking.schemas import Chunk


class BaseChunker(ABC):
    """Interface for document chunking strategies.

    Implementations hold configuration only and must not keep state
    between calls, so one instance can chunk many documents concurrently.
    """

    @abstractmethod
    def chunk(self, text: str) -> list[Chunk]:
        """Split text into chunks.

        Args:
            text: Full extracted document text.

        Returns:
            List of ``Chunk`` objects ordered by ``chunk_index``.
        """

    @classmethod
    def strategy_name(cls) -> str:
        """Return human-readable strategy name."""
        return cls.__name__
