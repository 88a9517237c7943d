"""Timeline and statistics views derived from a mood history."""

import math
from collections.abc import Sequence

from .lexicon import emotion_rank
from .models import HistorySummary, MoodData, TimelinePoint

TIMELINE_LIMIT = 7
RECENT_LIMIT = 5


def timeline(
    history: Sequence[MoodData], limit: int = TIMELINE_LIMIT
) -> list[TimelinePoint]:
    """Chart points for the last ``limit`` moods, oldest first."""
    window = list(history)[-limit:] if limit > 0 else []
    return [
        TimelinePoint(
            label=mood.timestamp.strftime("%b %d"),
            intensity=mood.intensity,
            emotion=mood.emotion,
            color=mood.color,
        )
        for mood in window
    ]


def recent_emotions(
    history: Sequence[MoodData], limit: int = RECENT_LIMIT
) -> list[MoodData]:
    """The last ``limit`` moods, newest first."""
    if limit <= 0:
        return []
    return list(reversed(list(history)[-limit:]))


def intensity_percent(mood: MoodData) -> int:
    """Intensity as a whole percentage, halves rounded up."""
    return math.floor(mood.intensity * 100 + 0.5)


def summarize(history: Sequence[MoodData]) -> HistorySummary:
    """
    Count emotions and average intensity over a history.

    Counts are ordered by lexicon position; emotions outside the lexicon
    follow in the order they were first seen. The dominant emotion is the
    most frequent one, ties going to the emotion listed first.
    """
    if not history:
        return HistorySummary()

    first_seen: dict[str, int] = {}
    counts: dict[str, int] = {}
    for index, mood in enumerate(history):
        first_seen.setdefault(mood.emotion, index)
        counts[mood.emotion] = counts.get(mood.emotion, 0) + 1

    def order(name: str) -> tuple[int, int]:
        rank = emotion_rank(name)
        if rank is None:
            return (1, first_seen[name])
        return (0, rank)

    ordered = {name: counts[name] for name in sorted(counts, key=order)}
    dominant = max(ordered, key=lambda name: ordered[name])  # first max wins

    return HistorySummary(
        total=len(history),
        counts=ordered,
        average_intensity=sum(mood.intensity for mood in history) / len(history),
        dominant_emotion=dominant,
    )
