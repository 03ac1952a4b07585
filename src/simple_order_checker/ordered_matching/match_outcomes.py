"""Ordered matching outcome entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class MatchOutcome(ABC, Generic[T]):
    """Result of one ordered subsequence match: `Matched` or `Unmatched`."""

    __slots__ = ()

    @abstractmethod
    def elements_not_found(self) -> tuple[T, ...] | None:
        """Return the expected elements never reached in order, or None when all were found."""

    def __bool__(self) -> bool:
        return self.elements_not_found() is None

    def assert_matched(self) -> None:
        """Fail the current test when expected elements are missing."""
        __tracebackhide__ = True  # pylint: disable=unused-variable
        not_found = self.elements_not_found()
        if not_found is not None:
            raise AssertionError(f"Missing elements: {list(not_found)!r}")

    def assert_unmatched(self) -> None:
        """Fail the current test when every expected element was found."""
        __tracebackhide__ = True  # pylint: disable=unused-variable
        if self.elements_not_found() is None:
            raise AssertionError(
                "Expected assertion to be rejected, but it was accepted. "
                f"Asserted on type {type(self).__name__}."
            )


@dataclass(frozen=True)
class Matched(MatchOutcome[T]):
    """All expected elements were found in order."""

    def elements_not_found(self) -> tuple[T, ...] | None:
        return None


@dataclass(frozen=True)
class Unmatched(MatchOutcome[T]):
    """Observed elements ran out before the expected elements were all found."""

    not_found: tuple[T, ...]

    def __post_init__(self) -> None:
        if not self.not_found:
            raise ValueError("Unmatched outcome requires at least one missing element.")

    def elements_not_found(self) -> tuple[T, ...] | None:
        return self.not_found
