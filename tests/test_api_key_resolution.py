from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.config import DEFAULT_GEMINI_MODEL, DEFAULT_TIMEOUT_S, ProxySettings, backend_url_from_env, resolve_api_key


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "GEMINI_API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "GEMINI_API_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_returns_empty_when_nothing_set(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    assert resolve_api_key(None, "GEMINI_API_KEY") == ""


def test_proxy_settings_have_no_default_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "not-used-by-the-proxy")
    settings = ProxySettings.from_env()
    assert settings.api_key == ""
    assert settings.has_api_key is False


def test_proxy_settings_read_model_and_timeout(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
    monkeypatch.setenv("GEMINI_TIMEOUT_S", "12.5")
    settings = ProxySettings.from_env()
    assert settings.api_key == "secret"
    assert settings.model == "gemini-test"
    assert settings.timeout_s == 12.5


def test_proxy_settings_ignore_bad_timeout(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.setenv("GEMINI_TIMEOUT_S", "soon")
    settings = ProxySettings.from_env()
    assert settings.model == DEFAULT_GEMINI_MODEL
    assert settings.timeout_s == DEFAULT_TIMEOUT_S


@pytest.mark.parametrize("raw", ["0", "-5", "nan", "inf", "-inf"])
def test_proxy_settings_reject_non_positive_or_non_finite_timeout(monkeypatch, raw):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_TIMEOUT_S", raw)
    assert ProxySettings.from_env().timeout_s == DEFAULT_TIMEOUT_S


def test_backend_url_strips_trailing_slash(monkeypatch):
    monkeypatch.setenv("MEDSCAN_BACKEND_URL", "https://medscan.example.com/ ")
    assert backend_url_from_env() == "https://medscan.example.com"
