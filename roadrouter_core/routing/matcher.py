"""Pattern Matcher - Wildcard matching for model identifiers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

WILDCARD = "*"


class PatternMatcher(ABC):
    """Abstract pattern matcher."""

    @abstractmethod
    def matches(self, pattern: str, value: str) -> bool:
        """Check if value matches pattern."""
        pass


class WildcardMatcher(PatternMatcher):
    """Wildcard pattern matcher.

    A pattern is a plain string in which every ``*`` stands for any
    sequence of characters, including none. There is no other syntax:
    no character classes, no escaping.

    Supports:
    - Exact matches: gpt-4o
    - Prefix/suffix wildcards: gpt-4*, *-preview
    - Multiple wildcards: claude-*-sonnet-*, *thinking*

    Interior segments bind to their leftmost occurrence after the
    cursor and are never revisited (no backtracking). Matching is
    linear in the length of the text.

    Usage:
        matcher = WildcardMatcher()
        matcher.matches("claude-*-sonnet-*", "claude-3-5-sonnet-20241022")
    """

    def matches(self, pattern: str, value: str) -> bool:
        """Check if value matches pattern."""
        segments = split_segments(pattern)

        if len(segments) == 1:
            return pattern == value

        first, interior, last = segments[0], segments[1:-1], segments[-1]

        cursor = 0
        if first:
            if not value.startswith(first):
                return False
            cursor = len(first)

        for segment in interior:
            if not segment:
                continue
            index = value.find(segment, cursor)
            if index < 0:
                return False
            cursor = index + len(segment)

        if last:
            return value[cursor:].endswith(last)

        return True


def split_segments(pattern: str) -> List[str]:
    """Split pattern into literal segments around each wildcard.

    A pattern without wildcards yields a single segment. Adjacent
    wildcards yield empty segments.
    """
    return pattern.split(WILDCARD)


def is_wildcard(pattern: str) -> bool:
    """Check if pattern contains a wildcard."""
    return WILDCARD in pattern


def specificity(pattern: str) -> int:
    """Score pattern by its literal content.

    Code point length minus the number of wildcards. An exact
    pattern scores its own length; ``*`` scores 0.
    """
    return len(pattern) - pattern.count(WILDCARD)


_default_matcher = WildcardMatcher()


def match(pattern: str, text: str) -> bool:
    """Match text against pattern with the default matcher."""
    return _default_matcher.matches(pattern, text)


__all__ = [
    "WILDCARD",
    "PatternMatcher",
    "WildcardMatcher",
    "split_segments",
    "is_wildcard",
    "specificity",
    "match",
]
