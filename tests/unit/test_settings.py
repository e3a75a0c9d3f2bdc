import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.logging import APP_LOGGER, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CACHE_BACKEND", raising=False)

        settings = Settings(_env_file=None)

        assert settings.cache_backend == "memory"
        assert settings.cache_ttl_seconds == 5
        assert settings.jwt_algorithm == "HS256"

    def test_secrets_are_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JWT_SECRET", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_BACKEND", "redis")
        monkeypatch.setenv("CACHE_TIMEOUT_SECONDS", "0.25")
        monkeypatch.setenv("CORS_ORIGINS", '["https://example.com"]')

        settings = Settings(_env_file=None)

        assert settings.cache_backend == "redis"
        assert settings.cache_timeout_seconds == 0.25
        assert settings.cors_origins == ["https://example.com"]


class TestConfigureLogging:
    def test_sets_level_without_duplicating_handlers(self) -> None:
        logger = logging.getLogger(APP_LOGGER)

        configure_logging("warning")
        handlers = list(logger.handlers)
        configure_logging("debug")

        assert logger.level == logging.DEBUG
        assert logger.handlers == handlers
