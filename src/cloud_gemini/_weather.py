"""Weather lookups against the WeatherAPI.com current-conditions endpoint."""

from __future__ import annotations

import logging

from cloud_gemini._exceptions import ProtocolError
from cloud_gemini._http import get_json, require
from cloud_gemini._types import WeatherRecord

logger = logging.getLogger(__name__)

WEATHER_ENDPOINT = "https://api.weatherapi.com/v1/current.json"
_SERVICE = "Weather API"
_UNIT_FIELDS = {"C": "current.temp_c", "F": "current.temp_f"}


async def fetch_weather(
    api_key: str,
    location: str,
    unit: str = "C",
    *,
    timeout: float = 30,
) -> WeatherRecord:
    """Fetch current weather for ``location``.

    Args:
        api_key: WeatherAPI.com key.
        location: Human-readable place name, e.g. "Paris" or "London,GB".
        unit: "C" or "F" for the returned temperature.
        timeout: Request timeout in seconds.

    Raises:
        NetworkError: The request failed or returned a non-success status.
        ParseError: The body is missing a field or has the wrong types.
    """
    if not location.strip():
        raise ProtocolError("Weather lookup needs a non-empty location")
    temp_field = _UNIT_FIELDS.get(unit.upper())
    if temp_field is None:
        raise ProtocolError(f"Unsupported temperature unit {unit!r}")

    logger.info("Fetching weather data for location: %s", location)
    data = await get_json(
        WEATHER_ENDPOINT,
        {"key": api_key, "q": location},
        service=_SERVICE,
        timeout=timeout,
    )
    record = WeatherRecord(
        temperature=float(require(data, temp_field, (int, float), service=_SERVICE)),
        condition=require(data, "current.condition.text", str, service=_SERVICE),
        humidity=int(require(data, "current.humidity", (int, float), service=_SERVICE)),
    )
    logger.debug("Weather data fetched successfully: %s", record)
    return record
