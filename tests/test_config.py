"""
Recordbook — Settings Tests
============================

Test Strategy:
    ✅ Defaults match a local install (port 5050, ./records, bundled templates)
    ✅ Environment variables override defaults
    ✅ Log level is validated and normalized
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from recordbook.config import DEFAULT_TEMPLATES_DIR, Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STORE_ROOT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.store_root == "records"
        assert settings.backend_port == 5050
        assert settings.log_level == "INFO"
        assert Path(settings.templates_dir) == DEFAULT_TEMPLATES_DIR

    def test_bundled_templates_exist(self):
        for view in ("index", "new", "show", "edit"):
            assert (DEFAULT_TEMPLATES_DIR / f"{view}.html").is_file()

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORE_ROOT", str(tmp_path))
        monkeypatch.setenv("BACKEND_PORT", "8080")

        settings = Settings(_env_file=None)

        assert settings.store_root == str(tmp_path)
        assert settings.backend_port == 8080

    def test_log_level_is_uppercased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(_env_file=None, log_level="chatty")

    def test_port_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, backend_port=70000)
