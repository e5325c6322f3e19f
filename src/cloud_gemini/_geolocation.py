"""Local time lookups against the IPGeolocation.io timezone endpoint."""

from __future__ import annotations

import logging

from cloud_gemini._exceptions import ProtocolError
from cloud_gemini._http import get_json, require
from cloud_gemini._types import TimeRecord

logger = logging.getLogger(__name__)

GEO_LOCATION_ENDPOINT = "https://api.ipgeolocation.io/timezone"
_SERVICE = "Geolocation API"


async def fetch_time(api_key: str, location: str, *, timeout: float = 30) -> TimeRecord:
    """Fetch the current local date and 24-hour time for ``location``."""
    if not location.strip():
        raise ProtocolError("Time lookup needs a non-empty location")

    logger.info("Fetching time data for location: %s", location)
    data = await get_json(
        GEO_LOCATION_ENDPOINT,
        {"apiKey": api_key, "location": location},
        service=_SERVICE,
        timeout=timeout,
    )
    record = TimeRecord(
        date=require(data, "date", str, service=_SERVICE),
        time=require(data, "time_24", str, service=_SERVICE),
    )
    logger.debug("Time data fetched successfully: %s", record)
    return record
