"""
Tests for the bounded mood history store.
"""

import threading
from datetime import datetime, timedelta, timezone

import pytest

from echovault_mood.classifier import classify
from echovault_mood.history import SAMPLE_TEXTS, MoodHistoryStore, sample_history

from .conftest import make_mood

NOW = datetime(2026, 10, 17, 8, 0, tzinfo=timezone.utc)


class TestMoodHistoryStore:
    """Test suite for MoodHistoryStore functionality."""

    def setup_method(self):
        """Set up a fresh, unseeded store for each test."""
        self.store = MoodHistoryStore(now=NOW)

    def test_initial_state(self):
        """A new store reports calm and has no history."""
        current = self.store.get_current()
        assert current.emotion == "calm"
        assert current.intensity == 0.5
        assert current.keywords == ("serene",)
        assert current.color == "#06b6d4"
        assert current.timestamp == NOW
        assert self.store.get_history() == []
        assert self.store.capacity == 50

    def test_record_updates_current_and_history(self):
        first = make_mood("joy", minutes=1)
        second = make_mood("sadness", minutes=2)

        self.store.record(first)
        assert self.store.get_current() == first
        assert self.store.get_history() == [first]

        self.store.record(second)
        assert self.store.get_current() == second
        assert self.store.get_history() == [first, second]

    def test_history_bounded_to_capacity(self):
        """After 60 records only the 50 most recent remain, in order."""
        recorded = [
            classify(f"entry {i} happy", NOW + timedelta(minutes=i)) for i in range(60)
        ]
        for mood in recorded:
            self.store.record(mood)

        history = self.store.get_history()
        assert len(history) == 50
        assert history == recorded[10:]
        assert self.store.get_current() == recorded[-1]

    def test_custom_capacity(self):
        store = MoodHistoryStore(capacity=3, now=NOW)
        moods = [make_mood(minutes=i) for i in range(5)]
        for mood in moods:
            store.record(mood)
        assert store.get_history() == moods[2:]
        assert len(store) == 3

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, True])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(ValueError):
            MoodHistoryStore(capacity=capacity)

    def test_history_is_a_snapshot(self):
        self.store.record(make_mood())
        snapshot = self.store.get_history()
        snapshot.clear()
        assert len(self.store.get_history()) == 1

    def test_concurrent_records(self):
        """Records from several threads are all kept up to capacity."""
        store = MoodHistoryStore(capacity=1000, now=NOW)

        def worker(offset: int) -> None:
            for i in range(100):
                store.record(make_mood(minutes=offset * 100 + i))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store.get_history()) == 400


class TestSeeding:
    """Test suite for the sample history used on first run."""

    def test_seeded_history(self):
        store = MoodHistoryStore(now=NOW, seed=True)
        history = store.get_history()

        assert len(history) == len(SAMPLE_TEXTS) == 5
        assert [mood.emotion for mood in history] == [
            "fear",
            "calm",
            "joy",
            "nostalgia",
            "joy",
        ]
        assert [mood.timestamp for mood in history] == [
            NOW - timedelta(days=days) for days in (5, 4, 3, 2, 1)
        ]
        assert history[3].keywords == ("miss", "childhood")
        assert history[4].keywords == ("joy",)

    def test_seeding_keeps_initial_current(self):
        store = MoodHistoryStore(now=NOW, seed=True)
        assert store.get_current().emotion == "calm"

    def test_sample_history_matches_classifier(self):
        history = sample_history(NOW)
        assert history[-1] == classify(SAMPLE_TEXTS[0], NOW - timedelta(days=1))
        assert history[0] == classify(SAMPLE_TEXTS[4], NOW - timedelta(days=5))

    def test_seeded_history_respects_capacity(self):
        store = MoodHistoryStore(capacity=2, now=NOW, seed=True)
        assert [mood.emotion for mood in store.get_history()] == ["nostalgia", "joy"]
