"""Document loader — PDF and plain text.

Supports both filesystem paths and in-memory bytes for web uploads.
"""

from __future__ import annotations

import logging
from pathlib import Path

from studyrag.documents.schemas import DocumentMetadata, LoadResult

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".txt", ".pdf"}
MAX_FILE_SIZE_MB = 10


class DocumentLoader:
    """Load documents into a structured ``LoadResult``."""

    def __init__(
        self,
        supported_extensions: set[str] | None = None,
        max_file_size_mb: int = MAX_FILE_SIZE_MB,
    ):
        self.supported_extensions = supported_extensions or SUPPORTED_EXTENSIONS
        self.max_file_size_mb = max_file_size_mb

    def load_file(self, path: str | Path) -> LoadResult:
        """Load a document from a filesystem path."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        ext = self._check_extension(path.name)
        data = path.read_bytes()
        result = self._dispatch(data, ext)
        result.source_path = str(path)
        return result

    def load_bytes(self, data: bytes, filename: str) -> LoadResult:
        """Load a document from in-memory bytes."""
        ext = self._check_extension(filename)
        result = self._dispatch(data, ext)
        result.source_path = filename
        return result

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _check_extension(self, filename: str) -> str:
        ext = Path(filename).suffix.lower()
        # Configured formats without a handler are not loadable
        loadable = self.supported_extensions & SUPPORTED_EXTENSIONS
        if ext not in loadable:
            raise ValueError(
                f"Unsupported format '{ext}'. Supported: {sorted(loadable)}"
            )
        return ext

    def _dispatch(self, data: bytes, ext: str) -> LoadResult:
        size_mb = len(data) / (1024 * 1024)
        if size_mb > self.max_file_size_mb:
            raise ValueError(
                f"File is {size_mb:.1f} MB, limit is {self.max_file_size_mb} MB"
            )

        handlers = {
            ".txt": self._load_txt,
            ".pdf": self._load_pdf,
        }
        result = handlers[ext](data)
        result.format = ext.lstrip(".")
        result.char_count = len(result.text)

        logger.info(
            "Loaded %s document: %d chars, %s pages, %d warnings",
            result.format, result.char_count, result.page_count, len(result.warnings),
        )
        return result

    # ------------------------------------------------------------------
    # Format-specific loaders
    # ------------------------------------------------------------------

    @staticmethod
    def _load_txt(data: bytes) -> LoadResult:
        for encoding in ("utf-8", "latin-1", "cp1252"):
            try:
                text = data.decode(encoding)
                return LoadResult(text=text, page_texts=[text], page_count=1)
            except UnicodeDecodeError:
                continue
        text = data.decode("utf-8", errors="replace")
        return LoadResult(
            text=text,
            page_texts=[text],
            page_count=1,
            warnings=["Encoding detection fell back to utf-8 with replacements"],
        )

    @staticmethod
    def _load_pdf(data: bytes) -> LoadResult:
        import io

        import pdfplumber

        warnings: list[str] = []
        page_texts: list[str] = []

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                info = pdf.metadata or {}
                for page in pdf.pages:
                    page_texts.append(page.extract_text() or "")
        except Exception as exc:
            logger.warning("PDF extraction failed: %s", exc)
            warnings.append(f"PDF extraction error: {exc}")
            return LoadResult(text="", warnings=warnings)

        full_text = "\n\n".join(page_texts)
        if not full_text.strip():
            warnings.append("PDF contains no extractable text (may be scanned/image-only)")

        return LoadResult(
            text=full_text,
            page_texts=page_texts,
            page_count=len(page_texts),
            metadata=DocumentMetadata(
                title=_info_str(info.get("Title")),
                author=_info_str(info.get("Author")),
                subject=_info_str(info.get("Subject")),
            ),
            warnings=warnings,
        )


def _info_str(value: object) -> str:
    """PDF info values may arrive as bytes, str, or be missing."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace").strip()
    return str(value).strip()
