"""
Unit tests for stale safe-label eviction.
"""

from handlescreen.labels import SAFE
from handlescreen.stability import StabilityTracker


class TestStabilityTracker:

    def test_four_flags_keep_label_fifth_evicts(self, corpus):
        corpus.add("badwords", SAFE)
        tracker = StabilityTracker(corpus)
        for _ in range(4):
            assert tracker.sweep("badword") == []
        assert corpus.contains("badwords", SAFE)
        assert tracker.count("badwords") == 4

        assert tracker.sweep("badword") == ["badwords"]
        assert not corpus.contains("badwords", SAFE)
        assert "badwords" not in tracker.counters

    def test_dissimilar_not_flagged(self, corpus):
        corpus.add("johndoe", SAFE)
        tracker = StabilityTracker(corpus)
        tracker.sweep("badword")
        assert tracker.count("johndoe") == 0
        assert "johndoe" not in tracker.counters

    def test_reset(self, corpus):
        corpus.add("badwords", SAFE)
        tracker = StabilityTracker(corpus)
        tracker.sweep("badword")
        tracker.sweep("badword")
        tracker.reset("badwords")
        assert tracker.count("badwords") == 0
        for _ in range(4):
            tracker.sweep("badword")
        assert corpus.contains("badwords", SAFE)

    def test_custom_limits(self, corpus):
        corpus.add("badwords", SAFE)
        tracker = StabilityTracker(corpus, min_similarity=0.8, eviction_limit=2)
        tracker.sweep("badword")
        assert tracker.sweep("badword") == ["badwords"]
