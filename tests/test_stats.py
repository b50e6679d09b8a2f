import pytest
from lazymatch import match_on, MatchStats, MatchVariant


class TestMatchStats:
    """Test the counters matchers keep while being pulled"""

    def test_fresh_matcher_stats(self):
        """Test a matcher that has not been pulled reports zeros"""
        stats = match_on(range(5)).arm(lambda x: True, lambda x: x).stats()

        assert isinstance(stats, MatchStats)
        assert stats.variant == MatchVariant.NO_DEFAULT
        assert stats.arms == 1
        assert stats.consumed == 0
        assert stats.produced == 0
        assert stats.arm_hits == [0]
        assert stats.exhausted is False

    def test_no_default_counts(self):
        """Test consumed/produced/skipped after a full run without default"""
        matcher = (
            match_on(range(1, 11))
            .arm(lambda x: x % 5 == 0, lambda x: x)
            .arm(lambda x: x % 2 == 0, lambda x: x)
        )
        matcher.to_list()
        stats = matcher.stats()

        assert stats.consumed == 10
        assert stats.produced == 6
        assert stats.skipped == 4
        assert stats.defaulted == 0
        assert stats.arm_hits == [2, 4], f"10 should count for the first arm only, got {stats.arm_hits}"
        assert stats.exhausted is True

    def test_with_default_counts(self):
        """Test defaulted count and variant for the default evaluator"""
        matcher = match_on(range(1, 11)).arm(lambda x: x % 2 == 0, lambda x: x).default(lambda: 0)
        matcher.to_list()
        stats = matcher.stats()

        assert stats.variant == "with_default"
        assert stats.consumed == stats.produced == 10
        assert stats.defaulted == 5
        assert stats.skipped == 0
        assert stats.arm_hits == [5]

    def test_partial_consumption_not_exhausted(self):
        """Test exhausted stays false until completion is signalled"""
        matcher = match_on(range(10)).default(lambda: 0)
        next(matcher)
        next(matcher)

        stats = matcher.stats()
        assert stats.consumed == 2
        assert stats.exhausted is False

    def test_stats_serialise(self):
        """Test stats dump to plain data"""
        matcher = match_on([1, 2]).arm(lambda x: x == 1, str)
        matcher.to_list()

        dumped = matcher.stats().model_dump()
        assert dumped == {
            "variant": "no_default",
            "arms": 1,
            "consumed": 2,
            "produced": 1,
            "skipped": 1,
            "defaulted": 0,
            "arm_hits": [1],
            "exhausted": True,
        }

    def test_stats_reject_negative_counts(self):
        """Test model validation on counters"""
        with pytest.raises(ValueError):
            MatchStats(variant="no_default", arms=-1)

    def test_repr_mentions_progress(self):
        matcher = match_on([1, 2, 3]).default(lambda: 0)
        next(matcher)

        assert repr(matcher) == "MatchWithDefault(arms=0, consumed=1)"
