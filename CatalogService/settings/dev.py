"""
Development settings for CatalogService.

Set DB_ENGINE=sqlite to work against a local SQLite file instead of the
PostgreSQL database configured in base.py.
"""
import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.environ.get("SQLITE_PATH", BASE_DIR / "catalog.sqlite3"),  # noqa: F405
        }
    }

# Echo catalog queries while developing
LOGGING["loggers"]["django.db.backends"]["level"] = "DEBUG"  # noqa: F405
