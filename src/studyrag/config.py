"""Application settings loaded from YAML with profile-based overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from studyrag.chunking.schemas import NormalizationMode
from studyrag.retrieval.schemas import RankerConfig
from studyrag.retrieval.stopwords import DEFAULT_STOP_WORDS

PROFILE_ENV_VAR = "STUDYRAG_PROFILE"

# ---------------------------------------------------------------------------
# Settings sections
# ---------------------------------------------------------------------------


class ChunkingSettings(BaseModel):
    target_size: int = 500
    overlap: int = 50
    normalization: NormalizationMode = NormalizationMode.PRESERVE_PARAGRAPHS


class RetrievalSettings(BaseModel):
    max_results: int = 3
    occurrence_weight: float = 3.0
    coverage_weight: float = 2.0
    position_decay: float = 0.1
    min_keyword_length: int = 3
    extra_stop_words: list[str] = Field(default_factory=list)

    def to_ranker_config(self) -> RankerConfig:
        """Build the immutable scoring config consumed by the ranker."""
        stop_words = DEFAULT_STOP_WORDS | {w.lower() for w in self.extra_stop_words}
        return RankerConfig(
            occurrence_weight=self.occurrence_weight,
            coverage_weight=self.coverage_weight,
            position_decay=self.position_decay,
            min_keyword_length=self.min_keyword_length,
            stop_words=frozenset(stop_words),
        )


class ChatSettings(BaseModel):
    results_per_query: int = 2
    max_context_chunks: int = 5


class IngestionSettings(BaseModel):
    supported_formats: list[str] = Field(
        default_factory=lambda: [".pdf", ".txt"]
    )
    max_file_size_mb: int = 10


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)


def _find_settings_file() -> Path | None:
    """Walk up from cwd looking for settings.yaml."""
    profile = os.getenv(PROFILE_ENV_VAR, "")
    names = [f"settings-{profile}.yaml", "settings.yaml"] if profile else ["settings.yaml"]

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in names:
            candidate = parent / name
            if candidate.exists():
                return candidate
    return None


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML file, falling back to defaults.

    An explicit ``path`` skips the directory walk.
    """
    path = Path(path) if path is not None else _find_settings_file()
    if path is None:
        return Settings()

    with open(path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}

    return Settings(**raw)
