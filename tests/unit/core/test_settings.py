"""
Unit tests for the logging configuration and development settings.
"""
import importlib
import json
import logging

from CatalogService.settings.logging import CustomJsonFormatter, get_logging_config


class TestLoggingConfig:
    """Tests for structured JSON logging."""

    def test_formatter_emits_json_with_service(self):
        """Test records are rendered as JSON tagged with the service name."""
        formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s")
        record = logging.LogRecord(
            "brands", logging.INFO, __file__, 1, "Brand created", None, None
        )
        record.brand_id = 7

        payload = json.loads(formatter.format(record))

        assert payload["service"] == "catalog-service"
        assert payload["level"] == "INFO"
        assert payload["message"] == "Brand created"
        assert payload["brand_id"] == 7

    def test_level_follows_environment(self):
        """Test development logs at DEBUG and other environments at INFO."""
        assert get_logging_config("development")["loggers"]["brands"]["level"] == "DEBUG"
        assert get_logging_config("production")["loggers"]["brands"]["level"] == "INFO"


class TestDevSettings:
    """Tests for the development settings module."""

    def test_sqlite_switch(self, monkeypatch, tmp_path):
        """Test DB_ENGINE=sqlite points the default database at a SQLite file."""
        monkeypatch.setenv("DB_ENGINE", "sqlite")
        monkeypatch.setenv("SQLITE_PATH", str(tmp_path / "dev.sqlite3"))

        dev = importlib.reload(importlib.import_module("CatalogService.settings.dev"))

        assert dev.DEBUG is True
        assert dev.DATABASES["default"]["ENGINE"] == "django.db.backends.sqlite3"
        assert dev.DATABASES["default"]["NAME"] == str(tmp_path / "dev.sqlite3")
        assert dev.LOGGING["loggers"]["django.db.backends"]["level"] == "DEBUG"
