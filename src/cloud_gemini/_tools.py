"""Tool declarations and the dispatcher that executes model tool calls."""

from __future__ import annotations

import dataclasses
import enum
import json
import logging

from cloud_gemini._config import Settings
from cloud_gemini._exceptions import MissingParameterError, ProtocolError
from cloud_gemini._geolocation import fetch_time
from cloud_gemini._types import Tool, ToolCall, ToolResult
from cloud_gemini._weather import fetch_weather

logger = logging.getLogger(__name__)


class ToolName(enum.StrEnum):
    """The closed set of tools the model may call."""

    WEATHER = "get_weather"
    TIME = "get_current_time"

    @classmethod
    def parse(cls, name: str) -> ToolName:
        try:
            return cls(name)
        except ValueError:
            raise ProtocolError(f"Tool call function not implemented: {name!r}") from None


_LOCATION_PARAM: dict[str, object] = {
    "type": "string",
    "description": 'Place name in English, optionally with a country code (e.g. "Seattle,US").',
}

WEATHER_TOOL = Tool(
    name=ToolName.WEATHER.value,
    description="Get the current weather for a location",
    parameters={
        "type": "object",
        "properties": {
            "location": _LOCATION_PARAM,
            "unit": {
                "type": "string",
                "enum": ["C", "F"],
                "description": "Temperature unit (C for Celsius, F for Fahrenheit)",
            },
        },
        "required": ["location"],
    },
)

TIME_TOOL = Tool(
    name=ToolName.TIME.value,
    description="Get the current date and time for a location",
    parameters={
        "type": "object",
        "properties": {"location": _LOCATION_PARAM},
        "required": ["location"],
    },
)

_DECLARATIONS: dict[ToolName, Tool] = {
    ToolName.WEATHER: WEATHER_TOOL,
    ToolName.TIME: TIME_TOOL,
}

_SCHEMA_TYPE_TO_PYTHON: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
}


def _validate_args(tool_def: Tool, arguments: dict[str, object]) -> None:
    """Validate arguments against a tool's parameter schema."""
    params = tool_def.parameters
    required = params.get("required", [])
    properties = params.get("properties", {})

    if isinstance(required, list):
        for key in required:
            if key not in arguments:
                raise MissingParameterError(tool_def.name, key)

    if not isinstance(properties, dict):
        return
    for key, value in arguments.items():
        prop_schema = properties.get(key)
        if not isinstance(prop_schema, dict):
            continue
        expected = _SCHEMA_TYPE_TO_PYTHON.get(str(prop_schema.get("type")))
        if expected is not None and not isinstance(value, expected):
            raise ProtocolError(
                f"Argument {key!r} for tool {tool_def.name!r} expected "
                f"{prop_schema['type']}, got {type(value).__name__}"
            )
        allowed = prop_schema.get("enum")
        if isinstance(allowed, list) and value not in allowed:
            raise ProtocolError(
                f"Argument {key!r} for tool {tool_def.name!r} must be one of {allowed}"
            )


class ToolDispatcher:
    """Routes model tool calls to the weather and time clients."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def declarations(self) -> list[Tool]:
        """Tool declarations advertised to the model."""
        return list(_DECLARATIONS.values())

    def validate(self, call: ToolCall) -> ToolName:
        """Check ``call`` against the declarations without running it.

        Raises ProtocolError for an undeclared tool or malformed arguments.
        """
        name = ToolName.parse(call.name)
        _validate_args(_DECLARATIONS[name], call.arguments)
        return name

    async def dispatch(self, call: ToolCall) -> ToolResult:
        """Execute ``call`` and wrap the record as a ToolResult.

        Unknown tools and malformed arguments raise ProtocolError before any
        client is invoked; client errors propagate unchanged.
        """
        logger.info("Tool call: %s(%s)", call.name, json.dumps(call.arguments))
        name = self.validate(call)

        args = call.arguments
        timeout = self._settings.timeout
        match name:
            case ToolName.WEATHER:
                record = await fetch_weather(
                    self._settings.weather_api_key,
                    str(args["location"]),
                    str(args.get("unit", "C")),
                    timeout=timeout,
                )
            case ToolName.TIME:
                record = await fetch_time(
                    self._settings.geolocation_api_key,
                    str(args["location"]),
                    timeout=timeout,
                )

        content = json.dumps(dataclasses.asdict(record))
        logger.debug("Tool result for %s: %s", name, content)
        return ToolResult(tool_call_id=call.id, name=name.value, content=content)
