"""Exceptions raised by the chat client and its tools.

Every error is fatal for the session: nothing is retried or downgraded.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base class for all errors that end a chat session."""


class ConfigurationError(AppError):
    """Raised when a required environment variable is missing or invalid."""


class NetworkError(AppError):
    """Raised when a request fails or a provider returns a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: dict[str, Any] | str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ParseError(AppError):
    """Raised when a response body does not have the expected shape."""


class ProtocolError(AppError):
    """Raised when the model requests an undeclared tool or sends a malformed call."""


class MissingParameterError(ProtocolError):
    """Raised when a tool call lacks a required argument."""

    def __init__(self, tool_name: str, parameter: str) -> None:
        self.tool_name = tool_name
        self.parameter = parameter
        super().__init__(f"Missing parameter {parameter!r} for tool {tool_name!r}")
