"""Routing Table - Immutable rule snapshots.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from roadrouter_core.routing.matcher import is_wildcard, specificity

RuleInput = Union["Rule", Tuple[str, str]]


class DuplicateRuleError(ValueError):
    """Raised when two rules share a pattern."""
    pass


@dataclass(frozen=True)
class Rule:
    """Routing rule: pattern mapped to a target model."""

    pattern: str
    target: str

    def __post_init__(self):
        if not isinstance(self.pattern, str):
            raise TypeError(f"Rule pattern must be str, got {type(self.pattern).__name__}")
        if not isinstance(self.target, str):
            raise TypeError(f"Rule target must be str, got {type(self.target).__name__}")

    @property
    def specificity(self) -> int:
        """Literal character count of the pattern."""
        return specificity(self.pattern)

    @property
    def is_exact(self) -> bool:
        """Check if pattern has no wildcard."""
        return not is_wildcard(self.pattern)


class RoutingTable:
    """Immutable snapshot of routing rules.

    Patterns are unique. Iteration order carries no meaning for
    resolution; updates return a new table instead of mutating this one.

    Usage:
        table = RoutingTable.from_dict({
            "gpt*": "gpt-4o-mini",
            "gpt-4*": "gpt-4o",
        })
        table = table.with_rule("claude-*", "claude-sonnet-4")
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Optional[Iterable[RuleInput]] = None):
        built: Dict[str, Rule] = {}

        for item in rules or ():
            rule = item if isinstance(item, Rule) else Rule(*item)
            if rule.pattern in built:
                raise DuplicateRuleError(f"Duplicate rule pattern: {rule.pattern!r}")
            built[rule.pattern] = rule

        self._rules: Mapping[str, Rule] = built

    @classmethod
    def from_dict(cls, routes: Mapping[str, str]) -> "RoutingTable":
        """Create table from a pattern -> target mapping."""
        return cls(routes.items())

    @classmethod
    def from_rules(cls, rules: Iterable[RuleInput]) -> "RoutingTable":
        """Create table from rules or (pattern, target) pairs."""
        return cls(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(tuple(self._rules.values()))

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._rules

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoutingTable):
            return NotImplemented
        return dict(self._rules) == dict(other._rules)

    def __hash__(self) -> int:
        return hash(frozenset(self._rules.values()))

    def __repr__(self) -> str:
        return f"RoutingTable({len(self)} rules)"

    def get(self, pattern: str) -> Optional[Rule]:
        """Get rule by pattern."""
        return self._rules.get(pattern)

    def rules(self) -> Tuple[Rule, ...]:
        """Get all rules."""
        return tuple(self._rules.values())

    def to_dict(self) -> Dict[str, str]:
        """Convert to pattern -> target mapping."""
        return {rule.pattern: rule.target for rule in self._rules.values()}

    def with_rule(self, pattern: str, target: str) -> "RoutingTable":
        """Return a new table with the rule added or replaced."""
        routes = self.to_dict()
        routes[pattern] = target
        return RoutingTable.from_dict(routes)

    def without_rule(self, pattern: str) -> "RoutingTable":
        """Return a new table without the rule for pattern."""
        return RoutingTable(
            rule for rule in self._rules.values() if rule.pattern != pattern
        )


__all__ = [
    "Rule",
    "RoutingTable",
    "DuplicateRuleError",
]
