"""Runtime configuration loaded once from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from dotenv import find_dotenv, load_dotenv

from cloud_gemini._exceptions import ConfigurationError

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TIMEOUT = 30.0

_REQUIRED_KEYS = {
    "GEMINI_API_KEY": "gemini_api_key",
    "WEATHER_API_KEY": "weather_api_key",
    "IP_GEOLOCATION_API_KEY": "geolocation_api_key",
}


@dataclass(frozen=True, slots=True)
class Settings:
    """Explicit configuration passed to the model client, tools and CLI."""

    gemini_api_key: str
    weather_api_key: str
    geolocation_api_key: str
    model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"Settings(model={self.model!r}, log_level={self.log_level!r}, "
            f"timeout={self.timeout!r})"
        )

    def with_overrides(self, *, model: str | None = None, log_level: str | None = None) -> Settings:
        """Return a copy with CLI-provided values applied."""
        updated = self
        if model:
            updated = replace(updated, model=model)
        if log_level:
            updated = replace(updated, log_level=_parse_log_level(log_level))
        return updated


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Invalid LOG_LEVEL {raw!r}")
    return level


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid HTTP_TIMEOUT {raw!r}: not a number") from None
    if timeout <= 0:
        raise ConfigurationError(f"Invalid HTTP_TIMEOUT {raw!r}: must be positive")
    return timeout


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``env`` (default: ``.env`` file plus ``os.environ``).

    Raises ConfigurationError listing every missing API key at once.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    keys: dict[str, str] = {}
    missing: list[str] = []
    for var, field_name in _REQUIRED_KEYS.items():
        value = env.get(var, "").strip()
        if not value:
            missing.append(var)
        keys[field_name] = value
    if missing:
        raise ConfigurationError(f"Environment variable not set: {', '.join(missing)}")

    return Settings(
        **keys,
        model=env.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
        log_level=_parse_log_level(env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        timeout=_parse_timeout(env.get("HTTP_TIMEOUT", str(DEFAULT_TIMEOUT))),
    )
