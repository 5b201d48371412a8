from datetime import date

import pytest

from fillout_filter import Settings
from fillout_filter.upstream import build_http_client, forwarded_params


def test_from_env_reads_values(monkeypatch):
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setenv("FILLOUT_BASE_URL", "https://fillout.example")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env(dotenv=False)

    assert settings.api_key == "secret"
    assert settings.fillout_base_url == "https://fillout.example"
    assert settings.port == 8080
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("API_KEY", "secret")
    for name in ("FILLOUT_BASE_URL", "PORT", "FORM_ID", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env(dotenv=False)

    assert settings.fillout_base_url == "https://api.fillout.com"
    assert settings.port == 3000
    assert settings.default_form_id is None
    assert settings.cors_origins == []


def test_missing_api_key_fails(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    with pytest.raises(RuntimeError, match="API_KEY"):
        Settings.from_env(dotenv=False)


def test_http_client_carries_bearer_token():
    settings = Settings(api_key="k", fillout_base_url="https://fillout.example")
    http = build_http_client(settings)
    try:
        assert http.headers["Authorization"] == "Bearer k"
        assert http.base_url.host == "fillout.example"
    finally:
        http.close()


def test_forwarded_params_formatting():
    assert forwarded_params(
        {"limit": 5, "afterDate": date(2024, 1, 2), "beforeDate": None, "includeEditLink": False}
    ) == {"limit": "5", "afterDate": "2024-01-02", "includeEditLink": "false"}
