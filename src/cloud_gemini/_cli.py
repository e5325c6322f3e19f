"""Terminal front end: reads lines from stdin and prints model replies."""

from __future__ import annotations

import asyncio
import logging

import typer

from cloud_gemini._chat import ChatSession, clean_input, is_exit
from cloud_gemini._config import Settings, load_settings
from cloud_gemini._exceptions import AppError
from cloud_gemini._gemini import GeminiClient
from cloud_gemini._tools import ToolDispatcher

logger = logging.getLogger(__name__)

GREETING = (
    "Hi, I'm a weather bot. I can tell you the weather and local time anywhere.\n"
    "Send `exit` to stop."
)
PROMPT = "> "

app = typer.Typer(
    name="cloud-gemini",
    help="Chat with Gemini about the weather and local time.",
    add_completion=False,
)


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with chat output."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def _read_line() -> str | None:
    try:
        return input(PROMPT)
    except EOFError:
        return None


def run_session(session: ChatSession) -> None:
    """Read user lines until ``exit``, EOF, or the model asks to stop.

    Input is read on the main thread so Ctrl-C interrupts a waiting prompt;
    each turn runs to completion on one event loop shared across turns.
    """
    with asyncio.Runner() as runner:
        while True:
            line = _read_line()
            if line is None:
                typer.echo()
                return
            if is_exit(line.strip()):
                return
            user_text = clean_input(line)
            if not user_text:
                continue

            reply = runner.run(session.send(user_text))
            typer.echo(reply)
            if is_exit(reply):
                return


def build_session(settings: Settings) -> ChatSession:
    model = GeminiClient(settings.model, settings.gemini_api_key, timeout=settings.timeout)
    return ChatSession(model, ToolDispatcher(settings))


@app.command()
def chat(
    model: str | None = typer.Option(None, "--model", "-m", help="Gemini model name."),
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Logging level (overrides LOG_LEVEL)."
    ),
) -> None:
    """Start an interactive chat session."""
    try:
        settings = load_settings().with_overrides(model=model, log_level=log_level)
    except AppError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from None

    configure_logging(settings.log_level)
    logger.debug("Loaded %r", settings)
    typer.echo(GREETING)

    try:
        run_session(build_session(settings))
    except AppError as exc:
        logger.error("Session aborted: %s", exc)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from None
    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None


def main() -> None:
    app()
