"""Conversation and tool-record types shared across the client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

# --- Conversation ---


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A tool call requested by the model."""

    id: str
    name: str
    arguments: dict[str, object]


@dataclass(frozen=True, slots=True)
class Message:
    """A chat turn from the user or the model."""

    role: str
    content: str = ""
    tool_calls: tuple[ToolCall, ...] = ()


@dataclass(frozen=True, slots=True)
class ToolResult:
    """A tool result sent back to the model after executing a tool call."""

    tool_call_id: str
    name: str
    content: str


@dataclass(frozen=True, slots=True)
class Tool:
    """A tool declaration advertised to the model."""

    name: str
    description: str
    parameters: dict[str, object]


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class Response:
    """A parsed model response: either text, tool calls, or both."""

    text: str = ""
    tool_calls: tuple[ToolCall, ...] = ()
    usage: Usage = field(default_factory=Usage)
    stop_reason: str = ""

    def to_message(self) -> Message:
        """Convert this response to a Message suitable for multi-turn conversations."""
        return Message(role="assistant", content=self.text, tool_calls=self.tool_calls)


ConversationItem: TypeAlias = Message | ToolResult


# --- Tool records ---


@dataclass(frozen=True, slots=True)
class WeatherRecord:
    """Current conditions for a location."""

    temperature: float
    condition: str
    humidity: int


@dataclass(frozen=True, slots=True)
class TimeRecord:
    """Local date and 24-hour time for a location."""

    date: str
    time: str
