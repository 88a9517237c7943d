"""
Tests for the static emotion lexicon.
"""

from echovault_mood.lexicon import (
    default_emotion,
    emotion_rank,
    get_emotion,
    lookup_all,
)


class TestLexicon:
    """Test suite for the emotion lexicon contents."""

    def test_order_and_names(self):
        """Emotions are listed in the fixed lexicon order."""
        names = [emotion.name for emotion in lookup_all()]
        assert names == [
            "joy",
            "sadness",
            "anger",
            "fear",
            "love",
            "hope",
            "nostalgia",
            "calm",
        ]
        assert len(set(names)) == len(names)

    def test_default_is_first_entry(self):
        assert default_emotion() == lookup_all()[0]
        assert default_emotion().name == "joy"

    def test_entries(self):
        """Spot-check keywords and colors."""
        anger = get_emotion("anger")
        assert anger is not None
        assert anger.keywords == ("angry", "mad", "furious", "hate", "annoyed")
        assert anger.color == "#ef4444"

        calm = get_emotion("calm")
        assert calm is not None
        assert calm.keywords == ("peaceful", "serene", "quiet", "meditation", "zen")
        assert calm.color == "#06b6d4"

    def test_keywords_are_lowercase(self):
        for emotion in lookup_all():
            assert len(emotion.keywords) == 5
            assert all(keyword == keyword.lower() for keyword in emotion.keywords)
            assert emotion.color.startswith("#")

    def test_unknown_emotion(self):
        assert get_emotion("excitement") is None
        assert emotion_rank("excitement") is None
        assert emotion_rank("joy") == 0
        assert emotion_rank("calm") == 7
