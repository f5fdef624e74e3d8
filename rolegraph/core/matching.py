"""Name matching strategies for roles and domains.

A role manager holds two strategies, one for role names and one for domain
names. Both start as :class:`ExactMatch`; installing a caller supplied
predicate replaces the slot with a :class:`PredicateMatch` and turns on
pattern mode for that slot.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from rolegraph.exceptions import InvalidArgumentError

MatchingFunc = Callable[[str, str], bool]


class MatchingStrategy(ABC):
    """Decides whether a candidate name is equivalent to a target name."""

    @property
    @abstractmethod
    def is_pattern(self) -> bool:
        """Whether the strategy does anything beyond string equality."""

    @abstractmethod
    def match(self, candidate: str, target: str) -> bool:
        """Return True if ``candidate`` is equivalent to ``target``."""


@dataclass(frozen=True)
class ExactMatch(MatchingStrategy):
    """Plain string equality."""

    @property
    def is_pattern(self) -> bool:
        return False

    def match(self, candidate: str, target: str) -> bool:
        return candidate == target


@dataclass(frozen=True)
class PredicateMatch(MatchingStrategy):
    """Equivalence decided by a caller supplied predicate.

    Attributes:
        func: Two-argument predicate ``(candidate, target) -> bool``
        name: Optional label, e.g. the policy function name it came from
    """

    func: MatchingFunc
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise InvalidArgumentError(
                "Matching function must be callable",
                details={"func_type": type(self.func).__name__},
            )

    @property
    def is_pattern(self) -> bool:
        return True

    def match(self, candidate: str, target: str) -> bool:
        return bool(self.func(candidate, target))


EXACT_MATCH = ExactMatch()


def as_strategy(matching: Optional[MatchingStrategy]) -> MatchingStrategy:
    """Normalize an optional strategy to a concrete one."""
    return EXACT_MATCH if matching is None else matching


__all__ = [
    "MatchingFunc",
    "MatchingStrategy",
    "ExactMatch",
    "PredicateMatch",
    "EXACT_MATCH",
    "as_strategy",
]
