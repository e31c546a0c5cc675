"""Document processing — file → extract text → chunk.

Runs once per upload, off the request path. The returned
``ProcessedDocument`` carries the status the document store should record:
``ready`` with the chunk sequence, or ``failed`` with the error.
"""

from __future__ import annotations

import logging
from pathlib import Path

from studyrag.chunking.paragraph_chunker import OVERLAP, TARGET_SIZE, ParagraphChunker
from studyrag.chunking.schemas import NormalizationMode
from studyrag.documents.loader import DocumentLoader
from studyrag.documents.schemas import DocumentStatus, LoadResult
from studyrag.pipeline.schemas import ProcessedDocument

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Orchestrates extraction and chunking for uploaded documents."""

    def __init__(
        self,
        loader: DocumentLoader | None = None,
        target_size: int = TARGET_SIZE,
        overlap: int = OVERLAP,
        mode: NormalizationMode = NormalizationMode.PRESERVE_PARAGRAPHS,
    ):
        self.loader = loader or DocumentLoader()
        self.chunker = ParagraphChunker(target_size=target_size, overlap=overlap, mode=mode)

    @classmethod
    def from_settings(cls, settings=None) -> DocumentProcessor:
        """Build a processor from ``Settings`` (loaded from YAML when omitted)."""
        from studyrag.config import load_settings

        settings = settings or load_settings()
        loader = DocumentLoader(
            supported_extensions=set(settings.ingestion.supported_formats),
            max_file_size_mb=settings.ingestion.max_file_size_mb,
        )
        return cls(
            loader=loader,
            target_size=settings.chunking.target_size,
            overlap=settings.chunking.overlap,
            mode=settings.chunking.normalization,
        )

    def process_file(self, path: str | Path) -> ProcessedDocument:
        """Extract and chunk a document on disk."""
        path = Path(path)
        try:
            loaded = self.loader.load_file(path)
        except Exception as exc:
            return self._failed(str(path), exc)
        return self._chunk_loaded(str(path), loaded)

    def process_bytes(self, data: bytes, filename: str) -> ProcessedDocument:
        """Extract and chunk an in-memory upload."""
        try:
            loaded = self.loader.load_bytes(data, filename)
        except Exception as exc:
            return self._failed(filename, exc)
        return self._chunk_loaded(filename, loaded)

    def process_text(self, text: str, source: str = "inline") -> ProcessedDocument:
        """Chunk already-extracted text (no loading step)."""
        return self._chunk_loaded(source, LoadResult(text=text, char_count=len(text)))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _chunk_loaded(self, source: str, loaded: LoadResult) -> ProcessedDocument:
        doc = ProcessedDocument(
            source=source,
            extracted_text=loaded.text,
            page_count=loaded.page_count,
            metadata=loaded.metadata,
            warnings=list(loaded.warnings),
        )

        if not loaded.text.strip():
            doc.status = DocumentStatus.FAILED
            doc.error = "Document contains no extractable text"
            logger.error("Processing %s failed: %s", source, doc.error)
            return doc

        try:
            doc.chunks = self.chunker.chunk(loaded.text)
        except Exception as exc:
            return self._failed(source, exc, doc)

        doc.status = DocumentStatus.READY
        logger.info(
            "Processed %s: %s pages, %d chunks",
            source, loaded.page_count, len(doc.chunks),
        )
        return doc

    @staticmethod
    def _failed(
        source: str,
        exc: Exception,
        doc: ProcessedDocument | None = None,
    ) -> ProcessedDocument:
        logger.exception("Processing %s failed", source)
        doc = doc or ProcessedDocument(source=source)
        doc.status = DocumentStatus.FAILED
        doc.error = str(exc)
        doc.chunks = []
        return doc
