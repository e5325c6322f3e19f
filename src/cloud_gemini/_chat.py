"""ChatSession: owns the transcript and drives the model/tool call loop."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from cloud_gemini._exceptions import ParseError
from cloud_gemini._types import (
    ConversationItem,
    Message,
    Response,
    Tool,
    ToolCall,
    ToolResult,
)

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "Answer with one sentence or tool call. Send `exit` to stop."
EXIT_KEYWORD = "exit"


class ChatModel(Protocol):
    async def complete(
        self,
        items: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
    ) -> Response: ...


class Dispatcher(Protocol):
    @property
    def declarations(self) -> list[Tool]: ...

    def validate(self, call: ToolCall) -> object: ...

    async def dispatch(self, call: ToolCall) -> ToolResult: ...


def clean_input(line: str) -> str:
    """Strip prompt markers and whitespace from a raw input line."""
    return line.strip().lstrip(">").strip()


def is_exit(text: str) -> bool:
    """True if ``text`` is the (case-sensitive) exit keyword."""
    return text == EXIT_KEYWORD


class ChatSession:
    """One interactive conversation between the user, the model and the tools.

    Each call to :meth:`send` appends the user turn, then alternates model
    calls and tool dispatches until the model answers in plain text. Every
    error propagates; the transcript is left as it was when the error hit.
    """

    def __init__(
        self,
        model: ChatModel,
        dispatcher: Dispatcher,
        *,
        system: str | None = SYSTEM_PROMPT,
    ) -> None:
        self._model = model
        self._dispatcher = dispatcher
        self._system = system
        self._transcript: list[ConversationItem] = []

    @property
    def transcript(self) -> Sequence[ConversationItem]:
        return tuple(self._transcript)

    async def send(self, user_text: str) -> str:
        """Run one user turn and return the model's final text."""
        logger.info("user: %s", user_text)
        self._transcript.append(Message(role="user", content=user_text))
        tools = self._dispatcher.declarations

        while True:
            response = await self._model.complete(
                list(self._transcript), system=self._system, tools=tools
            )

            if response.tool_calls:
                # Reject the whole batch before any call reaches the network.
                for call in response.tool_calls:
                    self._dispatcher.validate(call)
                self._transcript.append(response.to_message())
                # One outstanding request at a time, in the order the model asked.
                for call in response.tool_calls:
                    result = await self._dispatcher.dispatch(call)
                    self._transcript.append(result)
                continue

            if not response.text:
                raise ParseError(
                    f"Model returned no text and no tool call (finish reason: "
                    f"{response.stop_reason or 'unknown'})"
                )
            self._transcript.append(Message(role="assistant", content=response.text))
            logger.info("assistant: %s", response.text)
            return response.text
