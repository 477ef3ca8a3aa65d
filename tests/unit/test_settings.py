"""Tests for settings and logging configuration."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from query_patterns.config import Settings, configure_logging, get_settings


class TestSettings:
    def test_defaults(self, clean_settings: None) -> None:
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.embeddings_path is None
        assert settings.encoder_backend == "sentence-transformers"
        assert settings.encoder_model == "sentence-transformers/all-MiniLM-L6-v2"
        assert settings.device == "cpu"

    def test_env_prefix(
        self, clean_settings: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("QUERY_PATTERNS_EMBEDDINGS_PATH", "/tmp/assets/custom")
        monkeypatch.setenv("QUERY_PATTERNS_ENCODER_BACKEND", "huggingface")

        settings = Settings()

        assert settings.embeddings_path == Path("/tmp/assets/custom")
        assert settings.encoder_backend == "huggingface"

    def test_unknown_backend_rejected(
        self, clean_settings: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("QUERY_PATTERNS_ENCODER_BACKEND", "word2vec")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self, clean_settings: None) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_sets_package_level(self, clean_settings: None) -> None:
        configure_logging("DEBUG")

        assert logging.getLogger("query_patterns").level == logging.DEBUG
        assert logging.getLogger("sentence_transformers").level == logging.WARNING
