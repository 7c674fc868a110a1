"""
Test settings loading from the environment.

Each settings section reads its own prefixed variables (DB_*, API_*).
"""
from __future__ import annotations

import pytest

from core.settings import ApiSettings, AppSettings, DatabaseSettings, get_app_settings


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch, tmp_path):
    # Run from an empty directory so a developer's .env cannot leak in
    monkeypatch.chdir(tmp_path)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults(monkeypatch):
    for key in ("DB_DATABASE_URL", "API_ENVIRONMENT", "API_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    database = DatabaseSettings()
    api = ApiSettings()

    assert database.database_url == "sqlite+aiosqlite:///./orders.db"
    assert database.is_sqlite
    assert database.echo_sql is False
    assert api.environment == "production"
    assert not api.is_development
    assert api.log_level == "INFO"


def test_prefixed_env_vars(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "postgresql+asyncpg://user:pw@db:5432/orders")
    monkeypatch.setenv("DB_POOL_SIZE", "5")
    monkeypatch.setenv("API_ENVIRONMENT", "Development")
    monkeypatch.setenv("API_CORS_ORIGINS", '["https://shop.example.com"]')

    settings = AppSettings()

    assert settings.database.database_url.startswith("postgresql+asyncpg://")
    assert not settings.database.is_sqlite
    assert settings.database.pool_size == 5
    assert settings.api.is_development
    assert settings.api.cors_origins == ["https://shop.example.com"]


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("API_TITLE=Orders (local)\nDB_ECHO_SQL=true\n", encoding="utf-8")

    settings = AppSettings()

    assert settings.api.title == "Orders (local)"
    assert settings.database.echo_sql is True


def test_get_app_settings_is_cached():
    assert get_app_settings() is get_app_settings()
