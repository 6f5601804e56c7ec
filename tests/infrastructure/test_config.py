"""Settings — environment-driven configuration."""

import pytest
from pydantic import ValidationError

from contacts_api.config import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "mongodb://db:27017")
    monkeypatch.setenv("DB_NAME", "contacts")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings(_env_file=None)
    assert settings.mongodb_url == "mongodb://db:27017"
    assert settings.db_name == "contacts"
    assert settings.port == 8080


def test_settings_defaults(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "mongodb://db:27017")
    monkeypatch.delenv("DB_NAME", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.db_name == "test"
    assert settings.port == 3000


def test_missing_mongodb_url_is_fatal(monkeypatch):
    monkeypatch.delenv("MONGODB_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_mongodb_url_is_fatal(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "  ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
