"""Scripted chat: drive a ChatSession without the terminal front end.

Sends a fixed list of questions and prints each exchange, including the
tool calls the model made along the way. Needs GEMINI_API_KEY,
WEATHER_API_KEY and IP_GEOLOCATION_API_KEY (a .env file works too).
"""

import asyncio

from cloud_gemini import ChatSession, GeminiClient, ToolDispatcher, ToolResult, load_settings

QUESTIONS = [
    "What's the weather in Paris?",
    "And what time is it in Tokyo?",
]


async def main():
    settings = load_settings()
    model = GeminiClient(settings.model, settings.gemini_api_key)
    session = ChatSession(model, ToolDispatcher(settings))

    for question in QUESTIONS:
        seen = len(session.transcript)
        reply = await session.send(question)
        print(f"> {question}")
        for item in session.transcript[seen:]:
            if isinstance(item, ToolResult):
                print(f"  [{item.name} → {item.content}]")
        print(f"{reply}\n")


if __name__ == "__main__":
    asyncio.run(main())
