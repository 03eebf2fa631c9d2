from __future__ import annotations

import pytest
from pydantic import ValidationError

from chronicle.config.settings import Settings


def test_defaults(settings: Settings) -> None:
    assert settings.media_bucket == "media"
    assert settings.hero_folder == "branding"
    assert settings.featured_folder == "featured"
    assert settings.featured_limit == 12
    assert settings.homepage_card_limit == 6
    assert settings.storage_base_url == "https://project.supabase.co/storage/v1"
    assert settings.supabase_service_key.get_secret_value() == "service-role-key"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db.example.org:5432/postgres")
    monkeypatch.setenv("SUPABASE_URL", "https://other.supabase.co/")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "key")
    monkeypatch.setenv("HERO_FOLDER", "/site/branding/")
    monkeypatch.setenv("FEATURED_LIMIT", "3")

    settings = Settings()

    assert settings.hero_folder == "site/branding"
    assert settings.featured_limit == 3
    assert settings.storage_base_url == "https://other.supabase.co/storage/v1"


def test_required_values(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("DATABASE_URL", "SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ValidationError):
        Settings()


def test_featured_limit_must_be_positive(settings: Settings) -> None:
    with pytest.raises(ValidationError):
        Settings(
            DATABASE_URL=str(settings.database_url),
            SUPABASE_URL=str(settings.supabase_url),
            SUPABASE_SERVICE_ROLE_KEY="key",
            FEATURED_LIMIT=0,
        )
