"""
Static emotion lexicon.

The classifier's results depend entirely on the exact contents and order of
this table. The first entry is the fallback emotion.
"""

from .models import EmotionDefinition

_EMOTIONS: tuple[EmotionDefinition, ...] = (
    EmotionDefinition(
        name="joy",
        keywords=("happy", "excited", "great", "amazing", "wonderful"),
        color="#f59e0b",
    ),
    EmotionDefinition(
        name="sadness",
        keywords=("sad", "down", "depressed", "cry", "upset"),
        color="#3b82f6",
    ),
    EmotionDefinition(
        name="anger",
        keywords=("angry", "mad", "furious", "hate", "annoyed"),
        color="#ef4444",
    ),
    EmotionDefinition(
        name="fear",
        keywords=("scared", "afraid", "worried", "anxious", "nervous"),
        color="#8b5cf6",
    ),
    EmotionDefinition(
        name="love",
        keywords=("love", "adore", "cherish", "romance", "heart"),
        color="#ec4899",
    ),
    EmotionDefinition(
        name="hope",
        keywords=("hope", "optimistic", "future", "dream", "wish"),
        color="#10b981",
    ),
    EmotionDefinition(
        name="nostalgia",
        keywords=("remember", "past", "miss", "memories", "childhood"),
        color="#f97316",
    ),
    EmotionDefinition(
        name="calm",
        keywords=("peaceful", "serene", "quiet", "meditation", "zen"),
        color="#06b6d4",
    ),
)

_BY_NAME = {emotion.name: emotion for emotion in _EMOTIONS}
_RANK = {emotion.name: index for index, emotion in enumerate(_EMOTIONS)}


def lookup_all() -> tuple[EmotionDefinition, ...]:
    """Return every emotion definition in lexicon order."""
    return _EMOTIONS


def default_emotion() -> EmotionDefinition:
    """Return the fallback emotion used when nothing matches."""
    return _EMOTIONS[0]


def get_emotion(name: str) -> EmotionDefinition | None:
    return _BY_NAME.get(name)


def emotion_rank(name: str) -> int | None:
    """Position of an emotion in lexicon order, or None if unknown."""
    return _RANK.get(name)
