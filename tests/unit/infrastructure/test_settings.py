from __future__ import annotations

from src.config.settings import Settings


def test_postgres_url_uses_asyncpg_driver():
    settings = Settings.model_validate({"database_url": "postgres://u:p@db:5432/app"})
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/app"

    settings = Settings.model_validate({"database_url": "postgresql://u:p@db/app"})
    assert settings.database_url == "postgresql+asyncpg://u:p@db/app"

    settings = Settings.model_validate({"database_url": "sqlite+aiosqlite:///x.db"})
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_supabase_credentials_accept_nextjs_names(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_KEY", raising=False)
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
    monkeypatch.setenv("STORE_BACKEND", "supabase")
    monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_URL", "https://demo.supabase.co")
    monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_ANON_KEY", "anon-key")
    settings = Settings()
    assert settings.supabase_url == "https://demo.supabase.co"
    assert settings.supabase_key.get_secret_value() == "anon-key"
    assert settings.store_configured


def test_cors_origins_list():
    settings = Settings.model_validate({"cors_allow_origins": "http://a.test, http://b.test,"})
    assert settings.cors_allow_origins_list == ["http://a.test", "http://b.test"]
