"""Tests for shared/config.py."""

from pathlib import Path
from unittest.mock import patch
import os

from shared.config import DEFAULT_JWT_SECRET, Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.jwt_secret == DEFAULT_JWT_SECRET
        assert settings.jwt_algorithm == "HS256"
        assert settings.token_expire_days == 7
        assert settings.bcrypt_rounds == 10
        assert settings.users_file == Path("data") / "users.json"
        assert settings.cors_origins == ["http://localhost:5174"]
        assert settings.cors_allow_credentials is True

    def test_loads_from_env(self):
        """PORT and JWT_SECRET are read from the environment."""
        with patch.dict(os.environ, {"PORT": "9000", "JWT_SECRET": "s3cret"}):
            settings = Settings(_env_file=None)
            assert settings.port == 9000
            assert settings.jwt_secret == "s3cret"

    def test_uses_default_secret(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Settings(_env_file=None).uses_default_secret is True
        assert Settings(_env_file=None, jwt_secret="other").uses_default_secret is False


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
