"""Keyword-based mood classification."""

from datetime import datetime

from .lexicon import default_emotion, lookup_all
from .models import EmotionDefinition, MoodData

BASE_INTENSITY = 0.3
KEYWORD_WEIGHT = 0.2
LENGTH_DIVISOR = 500


def matched_keywords(emotion: EmotionDefinition, lowered_text: str) -> tuple[str, ...]:
    """Keywords of ``emotion`` found in ``lowered_text``, in lexicon order.

    Each keyword counts once no matter how often it occurs.
    """
    return tuple(keyword for keyword in emotion.keywords if keyword in lowered_text)


def classify(text: str, now: datetime) -> MoodData:
    """
    Classify free-form text into a mood record.

    Emotions are scanned in lexicon order and the first one with a strictly
    greater number of matching keywords wins, so ties favour the earlier
    emotion. Text matching nothing falls back to the default emotion.
    Every input, including the empty string, yields a valid record.

    Args:
        text: The raw text to classify
        now: Timestamp to stamp on the record

    Returns:
        The resulting MoodData
    """
    lowered = text.lower()

    best = default_emotion()
    best_matches: tuple[str, ...] = ()
    for emotion in lookup_all():
        matches = matched_keywords(emotion, lowered)
        if len(matches) > len(best_matches):
            best = emotion
            best_matches = matches

    count = len(best_matches)
    intensity = min(
        BASE_INTENSITY + (count * KEYWORD_WEIGHT) + (len(text) / LENGTH_DIVISOR), 1.0
    )

    return MoodData(
        emotion=best.name,
        intensity=intensity,
        timestamp=now,
        keywords=best_matches or (best.name,),
        color=best.color,
    )
