"""Async HTTP helpers using ``httpx``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from cloud_gemini._exceptions import NetworkError, ParseError

logger = logging.getLogger(__name__)


def _raise_for_status(r: httpx.Response, service: str) -> None:
    if r.is_success:
        return
    try:
        body: dict[str, Any] | str = r.json()
    except Exception:
        body = r.text
    logger.error("%s request failed: HTTP %s", service, r.status_code)
    raise NetworkError(
        f"{service} request failed: HTTP {r.status_code}: {body}",
        status_code=r.status_code,
        body=body,
    )


def _decode_json(r: httpx.Response, service: str) -> dict[str, Any]:
    try:
        data = r.json()
    except ValueError as exc:
        raise ParseError(f"{service} returned a non-JSON body: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(f"{service} returned {type(data).__name__}, expected a JSON object")
    return data


async def get_json(
    url: str,
    params: dict[str, str],
    *,
    service: str,
    timeout: float = 30,
) -> dict[str, Any]:
    """GET ``url`` with query ``params`` and return the parsed JSON object."""
    logger.debug("GET %s", url)
    try:
        async with httpx.AsyncClient() as client:
            r = await client.get(url, params=params, timeout=timeout)
    except httpx.HTTPError as exc:
        logger.error("%s request failed: %s", service, exc)
        raise NetworkError(f"{service} request failed: {exc}") from exc
    _raise_for_status(r, service)
    return _decode_json(r, service)


async def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    *,
    service: str,
    timeout: float = 60,
) -> dict[str, Any]:
    """POST JSON and return the parsed JSON object, raising on HTTP errors."""
    logger.debug("POST %s", url)
    try:
        async with httpx.AsyncClient() as client:
            r = await client.post(url, headers=headers, json=payload, timeout=timeout)
    except httpx.HTTPError as exc:
        logger.error("%s request failed: %s", service, exc)
        raise NetworkError(f"{service} request failed: {exc}") from exc
    _raise_for_status(r, service)
    return _decode_json(r, service)


def require(data: dict[str, Any], path: str, kind: type | tuple[type, ...], *, service: str) -> Any:
    """Return the value at dotted ``path`` in ``data``, checking its type.

    Raises ParseError if any segment is missing or the leaf has the wrong type.
    """
    value: Any = data
    for key in path.split("."):
        if not isinstance(value, dict) or key not in value:
            raise ParseError(f"{service} response is missing field {path!r}")
        value = value[key]
    # bool is an int subclass but never a valid numeric field
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ParseError(
            f"{service} response field {path!r} has type {type(value).__name__}"
        )
    return value
