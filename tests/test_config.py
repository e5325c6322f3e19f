"""Tests for environment configuration."""

from __future__ import annotations

import pytest

from cloud_gemini._config import DEFAULT_MODEL, Settings, load_settings
from cloud_gemini._exceptions import ConfigurationError

_ENV = {
    "GEMINI_API_KEY": "g",
    "WEATHER_API_KEY": "w",
    "IP_GEOLOCATION_API_KEY": "i",
}


def test_load_settings_defaults() -> None:
    settings = load_settings(_ENV)

    assert settings.gemini_api_key == "g"
    assert settings.weather_api_key == "w"
    assert settings.geolocation_api_key == "i"
    assert settings.model == DEFAULT_MODEL
    assert settings.log_level == "WARNING"
    assert settings.timeout == 30.0


def test_load_settings_optional_values() -> None:
    settings = load_settings(
        {**_ENV, "GEMINI_MODEL": "gemini-2.5-flash", "LOG_LEVEL": "debug", "HTTP_TIMEOUT": "5"}
    )
    assert settings.model == "gemini-2.5-flash"
    assert settings.log_level == "DEBUG"
    assert settings.timeout == 5.0


def test_missing_keys_reported_together() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings({"WEATHER_API_KEY": "w", "IP_GEOLOCATION_API_KEY": "  "})
    message = str(exc_info.value)
    assert "GEMINI_API_KEY" in message
    assert "IP_GEOLOCATION_API_KEY" in message
    assert "WEATHER_API_KEY" not in message


def test_invalid_log_level() -> None:
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        load_settings({**_ENV, "LOG_LEVEL": "chatty"})


@pytest.mark.parametrize("timeout", ["soon", "0", "-3"])
def test_invalid_timeout(timeout: str) -> None:
    with pytest.raises(ConfigurationError, match="HTTP_TIMEOUT"):
        load_settings({**_ENV, "HTTP_TIMEOUT": timeout})


def test_load_settings_reads_os_environ(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for key, value in _ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("GEMINI_MODEL", "from-env")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    assert load_settings().model == "from-env"


def test_dotenv_file_does_not_override_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("GEMINI_MODEL=from-dotenv\nWEATHER_API_KEY=dotenv-w\n")
    monkeypatch.setenv("GEMINI_API_KEY", "g")
    monkeypatch.setenv("IP_GEOLOCATION_API_KEY", "i")
    monkeypatch.setenv("GEMINI_MODEL", "from-env")
    # set first so teardown removes the value load_dotenv writes
    monkeypatch.setenv("WEATHER_API_KEY", "unset")
    monkeypatch.delenv("WEATHER_API_KEY")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)

    settings = load_settings()

    assert settings.model == "from-env"
    assert settings.weather_api_key == "dotenv-w"


def test_with_overrides() -> None:
    settings = load_settings(_ENV).with_overrides(model="other", log_level="info")
    assert settings.model == "other"
    assert settings.log_level == "INFO"
    assert settings.with_overrides() == settings


def test_repr_hides_keys() -> None:
    settings = Settings("secret-g", "secret-w", "secret-i")
    assert "secret" not in repr(settings)
