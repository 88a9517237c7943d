"""
Command-line interface tools for the EchoVault mood service.
"""

import asyncio
import json
from collections.abc import Coroutine
from datetime import datetime, timezone
from typing import Any

import httpx
import typer
from httpx_sse import ServerSentEvent, aconnect_sse

from .classifier import classify
from .config import get_settings
from .models import MoodData
from .views import intensity_percent

DEFAULT_BASE_URL = get_settings().base_url

app = typer.Typer(help="EchoVault mood CLI tools")


# MARK: - CLI Entry Points


def cli_analyze() -> None:
    """Entry point for mood-analyze CLI command."""
    typer.run(analyze)


def cli_get_mood() -> None:
    """Entry point for mood-get CLI command."""
    typer.run(get_mood)


def cli_stream() -> None:
    """Entry point for mood-stream CLI command."""
    typer.run(stream)


# MARK: - Commands


@app.command(name="classify")
def classify_text(
    text: str = typer.Argument(..., help="The text to classify"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Classify text locally without contacting the service."""
    mood = classify(text, datetime.now(timezone.utc))
    if json_output:
        print(mood.model_dump_json(indent=2))
        return
    print(format_mood(mood))


@app.command()
def analyze(
    text: str = typer.Argument(..., help="The text to analyze and record"),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the EchoVault service"
    ),
) -> None:
    """Analyze text on the service and record the resulting mood."""

    async def _analyze() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{base_url}/mood/analyze", json={"text": text}
            )
            response.raise_for_status()
            mood = MoodData.model_validate(response.json()["mood"])
            print(f"Mood recorded: {format_mood(mood)}")

    _run_with_error_handling(_analyze(), base_url)


@app.command(name="get")
def get_mood(
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the EchoVault service"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Get the current mood from the EchoVault service."""

    async def _get_mood() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{base_url}/mood")
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            mood = MoodData.model_validate(result["mood"])
            print(format_mood(mood))

    _run_with_error_handling(_get_mood(), base_url)


@app.command()
def history(
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the EchoVault service"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Print the recorded mood history, oldest first."""

    async def _history() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{base_url}/mood/history")
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            moods = [MoodData.model_validate(item) for item in result["history"]]
            if not moods:
                print("No moods recorded")
            for mood in moods:
                print(_format_mood_timestamp(mood))

    _run_with_error_handling(_history(), base_url)


@app.command()
def stream(
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the EchoVault service"
    ),
) -> None:
    """Stream mood updates in real-time."""

    async def _stream() -> None:
        print(f"Streaming from {base_url}/mood/stream... (Ctrl+C to stop)")

        async with httpx.AsyncClient(timeout=None) as client:
            async with aconnect_sse(
                client, "GET", f"{base_url}/mood/stream"
            ) as event_source:
                async for sse in event_source.aiter_sse():
                    _handle_sse_event(sse)

    _run_with_error_handling(_stream(), base_url)


# MARK: - Formatting


def format_mood(mood: MoodData) -> str:
    """One-line description of a mood, e.g. ``joy 42% (happy, great)``."""
    keywords = ", ".join(mood.keywords)
    return f"{mood.emotion} {intensity_percent(mood)}% ({keywords})"


# MARK: - Private Helpers


def _format_mood_timestamp(mood: MoodData) -> str:
    """Format mood prefixed with its local timestamp."""
    timestamp = mood.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return f"{timestamp} > {format_mood(mood)}"


def _handle_sse_event(sse: ServerSentEvent) -> None:
    """Handle a single SSE event."""
    try:
        if sse.event == "error":
            error_data = json.loads(sse.data)
            print(f"Server error: {error_data.get('error', 'Unknown error')}")
            return

        raw_data = json.loads(sse.data)

        if "error" in raw_data:
            print(f"Server error: {raw_data['error']}")
            return

        mood = MoodData.model_validate(raw_data)
        print(_format_mood_timestamp(mood))

    except json.JSONDecodeError as e:
        print(f"Warning: Could not parse SSE data: {sse.data} - {e}")
    except Exception as e:
        print(f"Warning: Error processing mood data: {e}")


def _run_with_error_handling(coro: Coroutine[Any, Any, Any], base_url: str) -> None:
    """Run an async coroutine with standardized error handling."""
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        print("\nStopped")
        raise typer.Exit(0)
    except httpx.ConnectError:
        print(f"Error: Could not connect to {base_url}")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        print(f"Error: HTTP {e.response.status_code}")
        raise typer.Exit(1)
    except Exception as e:
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
