"""Shared test fixtures for the EchoVault mood service."""

from datetime import datetime, timedelta, timezone

import pytest

from echovault_mood.models import MoodData

BASE_TIME = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


def make_mood(
    emotion: str = "joy", intensity: float = 0.5, minutes: int = 0
) -> MoodData:
    """Build a mood record offset from a fixed base time."""
    return MoodData(
        emotion=emotion,
        intensity=intensity,
        timestamp=BASE_TIME + timedelta(minutes=minutes),
        keywords=(emotion,),
        color="#000000",
    )


@pytest.fixture
def base_time():
    return BASE_TIME
