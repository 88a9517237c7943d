"""
Async mood relay for the EchoVault mood service.

This module wraps a MoodHistoryStore for concurrent async callers. Writes are
serialized through a condition variable, and every recorded mood is fanned
out to any number of streaming subscribers.
"""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog

from .classifier import classify
from .history import MoodHistoryStore
from .models import MoodData

logger = structlog.get_logger()


class MoodRelay:
    """
    Serialized access to a mood history with real-time streaming.

    Subscribers are woken through a shared condition variable and an update
    counter rather than per-subscriber queues, so a slow subscriber only ever
    sees the latest mood.
    """

    def __init__(self, store: MoodHistoryStore) -> None:
        self._store = store
        self._condition = asyncio.Condition()
        self._update_counter = 0

    @property
    def store(self) -> MoodHistoryStore:
        return self._store

    async def analyze(self, text: str) -> MoodData:
        """
        Classify text at the current time and record the result.

        Args:
            text: Free-form mood text

        Returns:
            The recorded MoodData
        """
        mood = classify(text, datetime.now(timezone.utc))
        return await self.update(mood)

    async def update(self, mood: MoodData) -> MoodData:
        """
        Record a mood and notify all subscribers.

        Args:
            mood: The mood to record

        Returns:
            The recorded MoodData
        """
        async with self._condition:
            self._store.record(mood)
            self._update_counter += 1
            self._condition.notify_all()

        logger.info(
            "mood_recorded",
            emotion=mood.emotion,
            intensity=round(mood.intensity, 3),
            keywords=list(mood.keywords),
        )
        return mood

    async def read(self) -> MoodData:
        """Get the current mood (calm until something is recorded)."""
        async with self._condition:
            return self._store.get_current()

    async def history(self) -> list[MoodData]:
        """Get the bounded history, oldest first."""
        async with self._condition:
            return self._store.get_history()

    @asynccontextmanager
    async def stream(self) -> AsyncGenerator[AsyncGenerator[MoodData, None], None]:
        """
        Stream mood updates to a subscriber.

        This context manager yields an async generator that produces the
        current mood immediately and then each newly recorded mood.

        Yields:
            An async generator of MoodData objects
        """

        async def mood_generator() -> AsyncGenerator[MoodData, None]:
            async with self._condition:
                last_seen_counter = self._update_counter
                mood = self._store.get_current()
            yield mood

            while True:
                async with self._condition:
                    await self._condition.wait_for(
                        lambda: self._update_counter > last_seen_counter
                    )
                    last_seen_counter = self._update_counter
                    mood = self._store.get_current()

                # Never suspend while holding the lock
                yield mood

        generator = mood_generator()
        try:
            yield generator
        finally:
            await generator.aclose()
