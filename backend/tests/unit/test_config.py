"""
Unit tests for application configuration.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from notesapi.config import Settings, get_settings


class TestSettings:
    """Test Settings configuration class."""

    def test_default_settings(self, monkeypatch):
        """Test default settings values."""
        for name in ("STORAGE_DIR", "LOG_DIR"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.app_name == "Notes API"
        assert settings.port == 8080
        assert settings.api_prefix == "/v1"
        assert settings.jwt_algorithm == "HS256"
        assert settings.token_expire_hours == 24
        assert settings.storage_dir == "/var/app/storage"
        assert settings.max_upload_mb == 10
        assert settings.sync_pull_limit == 100
        assert settings.log_dir == "logs"

    def test_env_overrides(self):
        env = {
            "JWT_SECRET": "from-env",
            "PORT": "9000",
            "DATABASE_URL": "sqlite+aiosqlite:///./test.db",
        }
        with patch.dict(os.environ, env):
            settings = Settings(_env_file=None)

        assert settings.jwt_secret == "from-env"
        assert settings.port == 9000
        assert settings.database_url == "sqlite+aiosqlite:///./test.db"

    def test_settings_are_frozen(self):
        settings = Settings(_env_file=None)

        with pytest.raises(ValidationError):
            settings.port = 1

    def test_get_settings_returns_shared_instance(self):
        assert get_settings() is get_settings()
