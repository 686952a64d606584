"""Router - Live routing table holder.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Iterable, List, Mapping, Optional, Union

from roadrouter_core.routing.resolver import RouteMatch, RouteResolver
from roadrouter_core.routing.table import Rule, RoutingTable, RuleInput

if TYPE_CHECKING:
    from roadrouter_core.utils.config import RouterConfig

logger = logging.getLogger(__name__)

RulesInput = Union[RoutingTable, Mapping[str, str], Iterable[RuleInput]]


def _build_table(rules: Optional[RulesInput]) -> RoutingTable:
    if rules is None:
        return RoutingTable()
    if isinstance(rules, RoutingTable):
        return rules
    if isinstance(rules, Mapping):
        return RoutingTable.from_dict(rules)
    return RoutingTable.from_rules(rules)


class Router:
    """Model Router.

    Features:
    - Exact and wildcard model patterns
    - Specificity-ranked resolution with deterministic ties
    - Default fallback target
    - Atomic table replacement on config reload

    Readers take the current table reference once per call and resolve
    against that snapshot without locking. Writers build a new table and
    swap the reference under a lock, so a resolution always sees either
    the entire old table or the entire new one.

    Usage:
        router = Router({"gpt-4*": "gpt-4o", "claude-*": "claude-sonnet-4"},
                        fallback="gpt-4o-mini")

        router.resolve("gpt-4-turbo")   # "gpt-4o"
        router.replace({"*": "local-llama"})
    """

    def __init__(
        self,
        rules: Optional[RulesInput] = None,
        fallback: Optional[str] = None,
        resolver: Optional[RouteResolver] = None,
    ):
        self._table = _build_table(rules)
        self._fallback = fallback
        self._resolver = resolver or RouteResolver()
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: "RouterConfig") -> "Router":
        """Create router from configuration."""
        return cls(config.routes, fallback=config.fallback)

    @property
    def table(self) -> RoutingTable:
        """Get the current table snapshot."""
        return self._table

    @property
    def fallback(self) -> Optional[str]:
        """Get the default fallback target."""
        return self._fallback

    @fallback.setter
    def fallback(self, value: Optional[str]) -> None:
        self._fallback = value

    def resolve_match(self, model: str, fallback: Optional[str] = None) -> RouteMatch:
        """Resolve a model and describe the decision.

        Args:
            model: Requested model identifier
            fallback: Overrides the router's default fallback

        Raises:
            NoRouteFound: If nothing matches and no fallback is set
        """
        table = self._table
        return self._resolver.resolve_match(
            model,
            table,
            fallback if fallback is not None else self._fallback,
        )

    def resolve(self, model: str, fallback: Optional[str] = None) -> str:
        """Resolve a model to its target."""
        return self.resolve_match(model, fallback).target

    def replace(self, rules: Optional[RulesInput]) -> RoutingTable:
        """Replace the whole table.

        Returns:
            The previous table
        """
        table = _build_table(rules)

        with self._lock:
            previous = self._table
            self._table = table

        logger.info(f"Routing table replaced: {len(previous)} -> {len(table)} rules")
        return previous

    def add(self, pattern: str, target: str) -> "Router":
        """Add or replace a rule."""
        with self._lock:
            self._table = self._table.with_rule(pattern, target)
        logger.debug(f"Route added: {pattern!r} -> {target!r}")
        return self

    def remove(self, pattern: str) -> bool:
        """Remove a rule by pattern."""
        with self._lock:
            if pattern not in self._table:
                return False
            self._table = self._table.without_rule(pattern)
        logger.debug(f"Route removed: {pattern!r}")
        return True

    def get_rules(self) -> List[Rule]:
        """Get all rules."""
        return list(self._table.rules())


__all__ = [
    "Router",
]
