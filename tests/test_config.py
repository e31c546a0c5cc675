"""Tests for YAML settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from studyrag.chunking.schemas import NormalizationMode
from studyrag.config import PROFILE_ENV_VAR, RetrievalSettings, Settings, load_settings


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(PROFILE_ENV_VAR, raising=False)
    return tmp_path


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.chunking.target_size == 500
        assert settings.chunking.overlap == 50
        assert settings.chunking.normalization == NormalizationMode.PRESERVE_PARAGRAPHS
        assert settings.retrieval.max_results == 3
        assert settings.chat.results_per_query == 2
        assert settings.chat.max_context_chunks == 5

    def test_load_explicit_path(self, tmp_path: Path):
        p = tmp_path / "custom.yaml"
        p.write_text("chunking:\n  target_size: 200\n  normalization: collapse_all\n")
        settings = load_settings(p)
        assert settings.chunking.target_size == 200
        assert settings.chunking.overlap == 50
        assert settings.chunking.normalization == NormalizationMode.COLLAPSE_ALL

    def test_walks_up_for_settings_file(self, isolated_cwd: Path, monkeypatch):
        (isolated_cwd / "settings.yaml").write_text("retrieval:\n  max_results: 7\n")
        nested = isolated_cwd / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_settings().retrieval.max_results == 7

    def test_profile_file_preferred(self, isolated_cwd: Path, monkeypatch):
        (isolated_cwd / "settings.yaml").write_text("retrieval:\n  max_results: 7\n")
        (isolated_cwd / "settings-test.yaml").write_text("retrieval:\n  max_results: 9\n")
        monkeypatch.setenv(PROFILE_ENV_VAR, "test")
        assert load_settings().retrieval.max_results == 9

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        p = tmp_path / "settings.yaml"
        p.write_text("")
        assert load_settings(p) == Settings()

    def test_invalid_value_rejected(self, tmp_path: Path):
        p = tmp_path / "settings.yaml"
        p.write_text("chunking:\n  normalization: squash\n")
        with pytest.raises(ValidationError):
            load_settings(p)


class TestRankerConfigFromSettings:
    def test_extra_stop_words(self):
        cfg = RetrievalSettings(extra_stop_words=["Chapter"]).to_ranker_config()
        assert "chapter" in cfg.stop_words
        assert "the" in cfg.stop_words

    def test_weights_carried_over(self):
        cfg = RetrievalSettings(occurrence_weight=5.0, position_decay=0.0).to_ranker_config()
        assert cfg.occurrence_weight == 5.0
        assert cfg.position_decay == 0.0

    def test_invalid_decay_rejected(self):
        with pytest.raises(ValueError):
            RetrievalSettings(position_decay=2.0).to_ranker_config()
