"""
Pattern matchers used by the scope filter.

A matcher answers one question: does a value match any of a fixed set of
patterns? Filesystem types are matched exactly; mount paths also accept
shell-style wildcards.
"""

from abc import ABC, abstractmethod
from fnmatch import fnmatchcase
from typing import Iterable, List, Tuple


class Matcher(ABC):
    """
    Abstract base class for pattern matchers.

    Attributes:
        patterns: The patterns, in configuration order.
    """

    def __init__(self, patterns: Iterable[str]):
        self.patterns: Tuple[str, ...] = tuple(patterns)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.patterns)!r})"

    @abstractmethod
    def matches(self, value: str) -> bool:
        """Return True if ``value`` matches at least one pattern."""
        pass


class ExactMatcher(Matcher):
    """Matches values equal to one of the patterns."""

    def __init__(self, patterns: Iterable[str]):
        super().__init__(patterns)
        self._lookup = frozenset(self.patterns)

    def matches(self, value: str) -> bool:
        return value in self._lookup


class GlobMatcher(Matcher):
    """
    Matches values equal to, or glob-matching, one of the patterns.

    Wildcards match within a single path segment and matching is
    case-sensitive on every platform. ``/tmp/*`` matches ``/tmp/foo`` but
    neither ``/tmp`` itself nor ``/tmp/foo/bar``.
    """

    def __init__(self, patterns: Iterable[str]):
        super().__init__(patterns)
        self._split = [pattern.split("/") for pattern in self.patterns]

    def matches(self, value: str) -> bool:
        segments = value.split("/")
        return any(
            value == pattern or _segments_match(segments, parts)
            for pattern, parts in zip(self.patterns, self._split)
        )


def _segments_match(segments: List[str], parts: List[str]) -> bool:
    if len(segments) != len(parts):
        return False
    return all(fnmatchcase(segment, part) for segment, part in zip(segments, parts))
