"""
FastAPI server for the EchoVault mood service.

This module implements the HTTP API endpoints for mood analysis, history
views and Server-Sent Events streaming of recorded moods.
"""

import json
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from . import __version__
from .classifier import classify
from .config import Settings, get_settings
from .history import MoodHistoryStore
from .lexicon import lookup_all
from .models import EmotionDefinition, HistorySummary, MoodData, TimelinePoint
from .relay import MoodRelay
from .views import TIMELINE_LIMIT, summarize, timeline

logger = structlog.get_logger()


# API Request/Response Schemas
class MoodText(BaseModel):
    """Payload for analysis requests."""

    text: str = Field(..., description="Free-form text describing a mood")


class MoodResponse(BaseModel):
    """Response model for single-mood endpoints."""

    mood: MoodData = Field(..., description="The mood record")


class HistoryResponse(BaseModel):
    history: list[MoodData] = Field(..., description="Recorded moods, oldest first")


class TimelineResponse(BaseModel):
    points: list[TimelinePoint]


class EmotionsResponse(BaseModel):
    emotions: list[EmotionDefinition]


def build_relay(settings: Settings) -> MoodRelay:
    """Create a relay over a fresh history store configured by ``settings``."""
    store = MoodHistoryStore(
        capacity=settings.history_capacity, seed=settings.seed_history
    )
    return MoodRelay(store)


def create_app(relay: MoodRelay) -> FastAPI:
    """
    Create a FastAPI application around the given mood relay.

    Args:
        relay: The MoodRelay instance to use for the application

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Lifespan context manager for FastAPI application."""
        logger.info(
            "service_started",
            capacity=relay.store.capacity,
            seeded=len(relay.store),
        )
        yield

    app = FastAPI(
        title="EchoVault Mood",
        description="Mood analysis and mood history service with SSE streaming",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "echovault-mood"}

    @app.get("/emotions")
    async def list_emotions() -> EmotionsResponse:
        """List the recognizable emotions in lexicon order."""
        return EmotionsResponse(emotions=list(lookup_all()))

    @app.get("/mood")
    async def get_mood() -> MoodResponse:
        """
        Get the current mood state.

        Returns:
            The most recently recorded mood (calm before any update)
        """
        return MoodResponse(mood=await relay.read())

    @app.put("/mood")
    async def update_mood(mood: MoodData) -> MoodResponse:
        """
        Record an already classified mood and notify all subscribers.

        Args:
            mood: The mood record to store

        Returns:
            The recorded mood
        """
        try:
            return MoodResponse(mood=await relay.update(mood))
        except Exception as e:
            raise HTTPException(
                status_code=500, detail=f"Failed to update mood: {str(e)}"
            )

    @app.post("/mood/analyze")
    async def analyze_mood(payload: MoodText) -> MoodResponse:
        """
        Classify text, record the result and notify all subscribers.

        Args:
            payload: The text to analyze

        Returns:
            The recorded mood
        """
        try:
            return MoodResponse(mood=await relay.analyze(payload.text))
        except Exception as e:
            raise HTTPException(
                status_code=500, detail=f"Failed to analyze mood: {str(e)}"
            )

    @app.post("/mood/classify")
    async def classify_mood(payload: MoodText) -> MoodResponse:
        """Classify text without recording it."""
        return MoodResponse(mood=classify(payload.text, datetime.now(timezone.utc)))

    @app.get("/mood/history")
    async def get_history() -> HistoryResponse:
        return HistoryResponse(history=await relay.history())

    @app.get("/mood/timeline")
    async def get_timeline(
        limit: int = Query(TIMELINE_LIMIT, ge=1, le=500),
    ) -> TimelineResponse:
        """Chart points for the most recent moods."""
        return TimelineResponse(points=timeline(await relay.history(), limit=limit))

    @app.get("/mood/summary")
    async def get_summary() -> HistorySummary:
        return summarize(await relay.history())

    @app.get("/mood/stream")
    async def stream_mood() -> StreamingResponse:
        """
        Stream mood updates via Server-Sent Events.

        The current mood is sent immediately on connection, followed by every
        mood recorded while the client stays connected.

        Returns:
            StreamingResponse with text/event-stream content type
        """

        async def event_generator() -> AsyncGenerator[str, None]:
            """Generate SSE events for mood updates."""
            try:
                async with relay.stream() as mood_stream:
                    async for mood in mood_stream:
                        yield f"data: {mood.model_dump_json()}\n\n"
            except Exception as e:
                error_data = json.dumps({"error": str(e)})
                yield f"event: error\ndata: {error_data}\n\n"

        return StreamingResponse(
            event_generator(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Headers": "*",
            },
        )

    return app


app = create_app(build_relay(get_settings()))


def main() -> None:
    """Main entry point for the server."""
    import uvicorn

    from .logging_config import setup_logging

    settings = get_settings()
    setup_logging(json_mode=settings.log_json, level=settings.log_level)

    uvicorn.run(
        "echovault_mood.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
