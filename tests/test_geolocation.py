"""Tests for the geolocation/time client."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from cloud_gemini._exceptions import NetworkError, ParseError, ProtocolError
from cloud_gemini._geolocation import GEO_LOCATION_ENDPOINT, fetch_time
from cloud_gemini._types import TimeRecord
from tests.conftest import TIME_BODY, httpx_response


async def test_fetch_time(mock_async_client: AsyncMock) -> None:
    mock_async_client.get.return_value = httpx_response(json_data=TIME_BODY)
    record = await fetch_time("geo-key", "Tokyo")

    assert record == TimeRecord(date="2024-06-01", time="21:15:00")
    call = mock_async_client.get.call_args
    assert call.args[0] == GEO_LOCATION_ENDPOINT
    assert call.kwargs["params"] == {"apiKey": "geo-key", "location": "Tokyo"}


async def test_fetch_time_empty_location(mock_async_client: AsyncMock) -> None:
    with pytest.raises(ProtocolError):
        await fetch_time("geo-key", "")
    mock_async_client.get.assert_not_called()


async def test_fetch_time_missing_time(mock_async_client: AsyncMock) -> None:
    mock_async_client.get.return_value = httpx_response(json_data={"date": "2024-06-01"})
    with pytest.raises(ParseError, match="time_24"):
        await fetch_time("geo-key", "Tokyo")


async def test_fetch_time_bad_status(mock_async_client: AsyncMock) -> None:
    mock_async_client.get.return_value = httpx_response(
        status_code=423, json_data={"message": "Provided location is invalid"}
    )
    with pytest.raises(NetworkError) as exc_info:
        await fetch_time("geo-key", "Nowhere")
    assert exc_info.value.status_code == 423


async def test_fetch_time_timeout(mock_async_client: AsyncMock) -> None:
    mock_async_client.get.side_effect = httpx.ReadTimeout("timed out")
    with pytest.raises(NetworkError):
        await fetch_time("geo-key", "Tokyo", timeout=0.1)
