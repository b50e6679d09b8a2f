"""
lazymatch - lazy, first-match-wins transformation of iterables.

    >>> from lazymatch import match_on
    >>> match_on(range(1, 6)).arm(lambda x: x % 2 == 0, lambda x: x * 10).to_list()
    [20, 40]
"""

from .lazy import Arm, Match, MatchExt, MatchWithDefault, match_on
from .models import MatchStats, MatchVariant, PerformanceReport, PerformanceSummary

__all__ = [
    "Arm",
    "Match",
    "MatchExt",
    "MatchWithDefault",
    "match_on",
    "MatchStats",
    "MatchVariant",
    "PerformanceReport",
    "PerformanceSummary",
]

__version__ = "0.1.0"
