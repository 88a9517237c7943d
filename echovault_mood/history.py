"""
Bounded in-memory mood history.

The store keeps the most recently recorded mood plus a capacity-bounded,
chronologically ordered log of recorded moods. Nothing is persisted.
"""

import threading
from collections import deque
from datetime import datetime, timedelta, timezone

import structlog

from .classifier import classify
from .models import MoodData

logger = structlog.get_logger()

DEFAULT_CAPACITY = 50

SAMPLE_TEXTS = (
    "Feeling grateful for this beautiful morning",
    "Missing my childhood friends today",
    "Excited about the upcoming adventure",
    "Reflecting on peaceful moments by the lake",
    "Worried about tomorrow's presentation",
)


def initial_mood(now: datetime) -> MoodData:
    """The mood a fresh store reports before anything is recorded."""
    return MoodData(
        emotion="calm",
        intensity=0.5,
        timestamp=now,
        keywords=("serene",),
        color="#06b6d4",
    )


def sample_history(now: datetime) -> list[MoodData]:
    """
    Classify the sample texts as if written on each of the previous days.

    The first sample is dated one day before ``now``, the second two days
    before, and so on. The result is returned oldest first.
    """
    moods = [
        classify(text, now - timedelta(days=index + 1))
        for index, text in enumerate(SAMPLE_TEXTS)
    ]
    moods.reverse()
    return moods


class MoodHistoryStore:
    """
    Current mood plus a bounded chronological history.

    ``record`` is serialized with a lock so a single store may be shared
    between threads. Reads return snapshots.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        now: datetime | None = None,
        seed: bool = False,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        created = now or datetime.now(timezone.utc)
        self._capacity = capacity
        self._lock = threading.Lock()
        self._current = initial_mood(created)
        self._history: deque[MoodData] = deque()

        if seed:
            for mood in sample_history(created):
                self._append(mood)

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, mood: MoodData) -> None:
        """
        Make ``mood`` the current mood and append it to the history.

        The oldest entries are evicted once the history exceeds capacity.
        """
        with self._lock:
            self._current = mood
            self._append(mood)

    def get_current(self) -> MoodData:
        return self._current

    def get_history(self) -> list[MoodData]:
        """Return the recorded moods, oldest first."""
        with self._lock:
            return list(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def _append(self, mood: MoodData) -> None:
        self._history.append(mood)
        while len(self._history) > self._capacity:
            evicted = self._history.popleft()
            logger.debug(
                "mood_evicted",
                emotion=evicted.emotion,
                timestamp=evicted.timestamp.isoformat(),
            )
