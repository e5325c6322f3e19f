"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from cloud_gemini._config import Settings

WEATHER_BODY: dict[str, Any] = {
    "location": {"name": "Paris", "region": "Ile-de-France", "country": "France"},
    "current": {
        "last_updated_epoch": 1717268100,
        "temp_c": 18.0,
        "temp_f": 64.4,
        "condition": {"text": "Cloudy"},
        "humidity": 72,
    },
}

TIME_BODY: dict[str, Any] = {
    "timezone": "Asia/Tokyo",
    "date": "2024-06-01",
    "time_24": "21:15:00",
    "time_12": "09:15:00 PM",
}


def httpx_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str = "",
) -> httpx.Response:
    """Create an httpx.Response with a JSON or text body."""
    return httpx.Response(
        status_code=status_code,
        text=json.dumps(json_data) if json_data is not None else text,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="gemini-key",
        weather_api_key="weather-key",
        geolocation_api_key="geo-key",
        timeout=5,
    )


@pytest.fixture
def mock_async_client():
    """Patch httpx.AsyncClient used by the HTTP helpers."""
    with patch("cloud_gemini._http.httpx.AsyncClient") as mock_cls:
        mock_instance = AsyncMock()
        mock_cls.return_value.__aenter__ = AsyncMock(return_value=mock_instance)
        mock_cls.return_value.__aexit__ = AsyncMock(return_value=None)
        yield mock_instance
