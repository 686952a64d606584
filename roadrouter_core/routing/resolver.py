"""Route Resolver - Best-match selection over a routing table.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from roadrouter_core.routing.matcher import PatternMatcher, WildcardMatcher
from roadrouter_core.routing.table import Rule, RoutingTable

logger = logging.getLogger(__name__)


class MatchMethod(Enum):
    """How a target was chosen."""

    EXACT = auto()
    WILDCARD = auto()
    FALLBACK = auto()


@dataclass(frozen=True)
class RouteMatch:
    """Result of a resolution."""

    model: str
    target: str
    method: MatchMethod
    pattern: Optional[str] = None
    specificity: int = 0
    candidates: int = 0

    @property
    def is_fallback(self) -> bool:
        """Check if no rule matched."""
        return self.method is MatchMethod.FALLBACK


class NoRouteFound(Exception):
    """Raised when no rule matches and no fallback is given."""

    def __init__(self, model: str):
        super().__init__(f"No route found for model: {model!r}")
        self.model = model


def _rank(rule: Rule) -> Tuple[int, str]:
    # Higher specificity first, then smallest pattern.
    return (-rule.specificity, rule.pattern)


class RouteResolver:
    """Route Resolver.

    Selects the single best rule for a model identifier:

    1. Collect every rule whose pattern matches.
    2. No match: return the fallback, or raise NoRouteFound.
    3. Otherwise pick the highest specificity.
    4. Ties go to the lexicographically smallest pattern.

    The outcome depends only on the set of rules, never on the order
    they were added or iterated in. Resolution holds no state and is
    safe to call from many threads against one table.

    Usage:
        resolver = RouteResolver()
        table = RoutingTable.from_dict({
            "gpt*": "fallback-model",
            "gpt-4*": "specific-model",
        })

        resolver.resolve("gpt-4-turbo", table)  # "specific-model"
    """

    def __init__(self, matcher: Optional[PatternMatcher] = None):
        self._matcher = matcher or WildcardMatcher()

    @property
    def matcher(self) -> PatternMatcher:
        """Get the pattern matcher."""
        return self._matcher

    def candidates(self, model: str, table: RoutingTable) -> List[Rule]:
        """Get all matching rules, best first."""
        matched = [rule for rule in table if self._matcher.matches(rule.pattern, model)]
        matched.sort(key=_rank)
        return matched

    def resolve_match(
        self,
        model: str,
        table: RoutingTable,
        fallback: Optional[str] = None,
    ) -> RouteMatch:
        """Resolve a model and describe the decision.

        Args:
            model: Requested model identifier
            table: Routing table snapshot
            fallback: Target used when no rule matches

        Returns:
            RouteMatch for the winning rule or the fallback

        Raises:
            NoRouteFound: If nothing matches and fallback is None
        """
        matched = self.candidates(model, table)

        if not matched:
            if fallback is None:
                logger.debug(f"No route for {model!r}")
                raise NoRouteFound(model)
            logger.debug(f"No route for {model!r}, using fallback {fallback!r}")
            return RouteMatch(
                model=model,
                target=fallback,
                method=MatchMethod.FALLBACK,
            )

        best = matched[0]
        if len(matched) > 1:
            logger.debug(
                f"{len(matched)} rules match {model!r}, "
                f"selected {best.pattern!r} (specificity {best.specificity})"
            )

        return RouteMatch(
            model=model,
            target=best.target,
            method=MatchMethod.EXACT if best.is_exact else MatchMethod.WILDCARD,
            pattern=best.pattern,
            specificity=best.specificity,
            candidates=len(matched),
        )

    def resolve(
        self,
        model: str,
        table: RoutingTable,
        fallback: Optional[str] = None,
    ) -> str:
        """Resolve a model to its target.

        Raises:
            NoRouteFound: If nothing matches and fallback is None
        """
        return self.resolve_match(model, table, fallback).target


_default_resolver = RouteResolver()


def resolve(model: str, table: RoutingTable, fallback: Optional[str] = None) -> str:
    """Resolve a model with the default resolver."""
    return _default_resolver.resolve(model, table, fallback)


__all__ = [
    "RouteResolver",
    "RouteMatch",
    "MatchMethod",
    "NoRouteFound",
    "resolve",
]
