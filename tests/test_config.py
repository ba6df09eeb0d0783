from __future__ import annotations

from pathlib import Path

from objectlibrary.config import DEFAULT_SERVICE_TIMEOUT, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("OBJECTLIBRARY_DATA_DIR", raising=False)
    monkeypatch.delenv("OBJECTLIBRARY_SERVICE_TIMEOUT", raising=False)
    monkeypatch.delenv("POKEAPI_BASE_URL", raising=False)
    settings = get_settings()
    assert settings.DATA_DIR == Path.home() / ".objectlibrary"
    assert settings.SERVICE_TIMEOUT == DEFAULT_SERVICE_TIMEOUT == 60
    assert settings.POKEAPI_BASE_URL == "https://pokeapi.co/api/v2"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("OBJECTLIBRARY_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("OBJECTLIBRARY_SERVICE_TIMEOUT", "5.5")
    monkeypatch.setenv("POKEAPI_BASE_URL", "https://mirror.test/api/")
    settings = get_settings()
    assert settings.DATA_DIR == tmp_path
    assert settings.SERVICE_TIMEOUT == 5.5
    assert settings.POKEAPI_BASE_URL == "https://mirror.test/api"


def test_invalid_timeout_falls_back(monkeypatch):
    for value in ("soon", "0", "-3"):
        monkeypatch.setenv("OBJECTLIBRARY_SERVICE_TIMEOUT", value)
        assert get_settings().SERVICE_TIMEOUT == 60
