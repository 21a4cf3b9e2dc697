"""Tests for config/settings.py"""

from __future__ import annotations

from pathlib import Path

import pytest

from config.settings import Settings
from fundamentals.loader import CONTENT_DIR


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CONTENT_DIR", "FLASK_DEBUG", "PORT", "HOST", "LOG_LEVEL", "STRICT_AUDIT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.content_dir == CONTENT_DIR
        assert settings.debug is False
        assert settings.port == 5000
        assert settings.host == "127.0.0.1"
        assert settings.log_level == "INFO"
        assert settings.strict_audit is False
        settings.validate()

    def test_environment_overrides(self, monkeypatch, content_dir: Path):
        monkeypatch.setenv("CONTENT_DIR", str(content_dir))
        monkeypatch.setenv("FLASK_DEBUG", "1")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("STRICT_AUDIT", "1")
        settings = Settings()
        assert settings.content_dir == content_dir
        assert settings.debug is True
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"
        assert settings.strict_audit is True

    def test_validate_missing_directory(self, tmp_path: Path):
        with pytest.raises(ValueError, match="not a directory"):
            Settings(content_dir=tmp_path / "missing").validate()

    def test_validate_missing_category_index(self, tmp_path: Path):
        with pytest.raises(ValueError, match="categories.json"):
            Settings(content_dir=tmp_path).validate()
