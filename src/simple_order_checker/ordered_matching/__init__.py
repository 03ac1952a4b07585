"""Ordered matching domain exports."""

from .match_outcomes import Matched, MatchOutcome, Unmatched
from .subsequence_matcher import contains_at_least_ordered

__all__ = [
    "MatchOutcome",
    "Matched",
    "Unmatched",
    "contains_at_least_ordered",
]
