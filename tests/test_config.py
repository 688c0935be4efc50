"""Tests for IgApiSettings."""

import pytest

from igrest.config import IgApiSettings, get_settings
from igrest.constants import DEFAULT_BASE_URL


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("BASE_URL", "ACCOUNT_ID", "API_KEY", "USERNAME", "PASSWORD"):
        monkeypatch.delenv(f"IG_{name}", raising=False)
    settings = IgApiSettings(_env_file=None)

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.request_timeout == 30.0
    assert settings.account_id is None
    assert settings.api_key is None


def test_loaded_from_prefixed_environment(monkeypatch):
    monkeypatch.setenv("IG_BASE_URL", "api.ig.com/gateway/deal")
    monkeypatch.setenv("IG_ACCOUNT_ID", "A1")
    monkeypatch.setenv("IG_API_KEY", "K1")
    monkeypatch.setenv("ig_password", "pass")

    settings = IgApiSettings(_env_file=None)

    assert settings.base_url == "api.ig.com/gateway/deal"
    assert settings.account_id == "A1"
    assert settings.api_key is not None
    assert settings.api_key.get_secret_value() == "K1"
    assert settings.password.get_secret_value() == "pass"


def test_loaded_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("IG_USERNAME", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("IG_USERNAME=file-user\nUNRELATED=1\n")

    settings = IgApiSettings(_env_file=env_file)

    assert settings.username == "file-user"


def test_secrets_hidden_in_repr():
    settings = IgApiSettings(_env_file=None, api_key="K-SECRET", password="P-SECRET")
    assert "K-SECRET" not in repr(settings)
    assert "P-SECRET" not in repr(settings)


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("IG_BASE_URL", "cached.example.com")
    assert get_settings() is get_settings()
    assert get_settings().base_url == "cached.example.com"
