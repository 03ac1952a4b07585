"""Ordered, noise-skipping subsequence matching."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Final, TypeVar

from .match_outcomes import Matched, MatchOutcome, Unmatched

T = TypeVar("T")


class _Exhausted(Enum):
    """Marker returned by `next()` once the expected elements run out."""

    TOKEN = "exhausted"


_EXHAUSTED: Final = _Exhausted.TOKEN


def contains_at_least_ordered(observed: Iterable[T], expected: Iterable[T]) -> MatchOutcome[T]:
    """Check that `expected` occurs in `observed` in the same order, skipping other elements.

    Matching is greedy: the first observed element equal to the current expected
    element is always taken and never revisited. Both iterables are consumed once,
    and elements are compared with `==` only.

    Args:
      observed: Elements to search; may contain arbitrary noise.
      expected: Elements required to appear, in this order.

    Returns:
      `Matched` when every expected element was found, otherwise `Unmatched`
      carrying the expected elements from the first one never reached.
    """
    pending = iter(expected)
    target = next(pending, _EXHAUSTED)
    # The empty sequence is contained in any sequence.
    if target is _EXHAUSTED:
        return Matched()

    lookahead = next(pending, _EXHAUSTED)
    for element in observed:
        if element == target:
            if lookahead is _EXHAUSTED:
                return Matched()
            target, lookahead = lookahead, next(pending, _EXHAUSTED)

    if lookahead is _EXHAUSTED:
        return Unmatched(not_found=(target,))
    return Unmatched(not_found=(target, lookahead, *pending))
