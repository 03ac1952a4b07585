"""Ordered subsequence matching for test assertions."""

from .ordered_matching import Matched, MatchOutcome, Unmatched, contains_at_least_ordered

__all__ = [
    "MatchOutcome",
    "Matched",
    "Unmatched",
    "contains_at_least_ordered",
]
