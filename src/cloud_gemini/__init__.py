"""cloud-gemini: a Gemini chat client with weather and local-time tools."""

from cloud_gemini._chat import EXIT_KEYWORD, SYSTEM_PROMPT, ChatSession
from cloud_gemini._config import Settings, load_settings
from cloud_gemini._exceptions import (
    AppError,
    ConfigurationError,
    MissingParameterError,
    NetworkError,
    ParseError,
    ProtocolError,
)
from cloud_gemini._gemini import GeminiClient
from cloud_gemini._geolocation import fetch_time
from cloud_gemini._tools import TIME_TOOL, WEATHER_TOOL, ToolDispatcher, ToolName
from cloud_gemini._types import (
    Message,
    Response,
    TimeRecord,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
    WeatherRecord,
)
from cloud_gemini._weather import fetch_weather

__all__ = [
    "EXIT_KEYWORD",
    "SYSTEM_PROMPT",
    "TIME_TOOL",
    "WEATHER_TOOL",
    "AppError",
    "ChatSession",
    "ConfigurationError",
    "GeminiClient",
    "Message",
    "MissingParameterError",
    "NetworkError",
    "ParseError",
    "ProtocolError",
    "Response",
    "Settings",
    "TimeRecord",
    "Tool",
    "ToolCall",
    "ToolDispatcher",
    "ToolName",
    "ToolResult",
    "Usage",
    "WeatherRecord",
    "fetch_time",
    "fetch_weather",
    "load_settings",
]
