"""Client for the Google Gemini generateContent API."""

from __future__ import annotations

import json
import logging
from typing import Any

from cloud_gemini._exceptions import ParseError
from cloud_gemini._http import post_json
from cloud_gemini._types import (
    ConversationItem,
    Response,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
)

logger = logging.getLogger(__name__)

_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
_VALID_ROLES = {"user", "assistant"}


def _tools_to_gemini(tools: list[Tool]) -> list[dict[str, Any]]:
    return [
        {
            "functionDeclarations": [
                {
                    "name": t.name,
                    "description": t.description,
                    "parameters": t.parameters,
                }
                for t in tools
            ]
        }
    ]


def _parse_response(raw: dict[str, Any]) -> Response:
    candidates = raw.get("candidates") or []
    if not isinstance(candidates, list):
        raise ParseError(f"Gemini 'candidates' is {type(candidates).__name__}, expected a list")
    if not candidates:
        return Response()

    candidate = candidates[0]
    parts = candidate.get("content", {}).get("parts", [])
    if not isinstance(parts, list):
        raise ParseError(f"Gemini 'parts' is {type(parts).__name__}, expected a list")

    text_parts: list[str] = []
    tool_calls: list[ToolCall] = []

    for part in parts:
        if "text" in part:
            text_parts.append(part["text"])
        elif "functionCall" in part:
            fc = part["functionCall"]
            args = fc.get("args") or {}
            if not isinstance(args, dict):
                raise ParseError(
                    f"Gemini functionCall args is {type(args).__name__}, expected an object"
                )
            tool_calls.append(
                ToolCall(
                    # Gemini doesn't provide a tool call ID
                    id=f"call_{len(tool_calls)}",
                    name=fc.get("name", ""),
                    arguments=args,
                )
            )

    raw_usage = raw.get("usageMetadata", {})
    usage = Usage(
        input_tokens=raw_usage.get("promptTokenCount", 0),
        output_tokens=raw_usage.get("candidatesTokenCount", 0),
        total_tokens=raw_usage.get("totalTokenCount", 0),
    )

    return Response(
        text="".join(text_parts).strip(),
        tool_calls=tuple(tool_calls),
        usage=usage,
        stop_reason=candidate.get("finishReason", ""),
    )


def _items_to_contents(items: list[ConversationItem]) -> list[dict[str, Any]]:
    """Convert transcript items to Gemini contents format."""
    contents: list[dict[str, Any]] = []
    pending_fn_responses: list[dict[str, Any]] = []

    def _flush_fn_responses() -> None:
        if pending_fn_responses:
            contents.append({"role": "user", "parts": list(pending_fn_responses)})
            pending_fn_responses.clear()

    for item in items:
        if isinstance(item, ToolResult):
            try:
                response_data = json.loads(item.content)
            except (json.JSONDecodeError, TypeError):
                response_data = {"result": item.content}
            if not isinstance(response_data, dict):
                response_data = {"result": response_data}
            pending_fn_responses.append(
                {
                    "functionResponse": {
                        "name": item.name,
                        "response": response_data,
                    }
                }
            )
            continue

        _flush_fn_responses()
        if item.tool_calls:
            parts: list[dict[str, Any]] = []
            if item.content:
                parts.append({"text": item.content})
            for tc in item.tool_calls:
                parts.append({"functionCall": {"name": tc.name, "args": tc.arguments}})
            contents.append({"role": "model", "parts": parts})
        else:
            if item.role not in _VALID_ROLES:
                raise ValueError(
                    f"Gemini does not support role {item.role!r}. "
                    "Use the system= parameter for system prompts."
                )
            role = "model" if item.role == "assistant" else item.role
            contents.append({"role": role, "parts": [{"text": item.content}]})

    _flush_fn_responses()
    return contents


class GeminiClient:
    """Async Gemini generateContent client.

    Usage::

        client = GeminiClient("gemini-2.0-flash", api_key)
        response = await client.complete([Message("user", "Hello!")])
        print(response.text)
    """

    def __init__(self, model: str, api_key: str, *, timeout: float = 60) -> None:
        self.model = model
        self._timeout = timeout
        self._url = f"{_BASE_URL}/{model}:generateContent"
        self._headers = {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }

    def _build_payload(
        self,
        items: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"contents": _items_to_contents(items)}
        if system:
            payload["systemInstruction"] = {"parts": [{"text": system}]}
        if tools:
            payload["tools"] = _tools_to_gemini(tools)
        return payload

    async def complete(
        self,
        items: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
    ) -> Response:
        """Send the transcript and return the parsed model response."""
        payload = self._build_payload(items, system=system, tools=tools)
        logger.debug("Sending %d transcript items to %s", len(items), self.model)
        raw = await post_json(
            self._url, self._headers, payload, service="Gemini API", timeout=self._timeout
        )
        try:
            response = _parse_response(raw)
        except (AttributeError, KeyError, IndexError, TypeError) as exc:
            raise ParseError(f"Unexpected Gemini API response shape: {exc}") from exc
        logger.debug(
            "Gemini usage: input=%d output=%d total=%d",
            response.usage.input_tokens,
            response.usage.output_tokens,
            response.usage.total_tokens,
        )
        return response
