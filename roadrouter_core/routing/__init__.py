"""Routing module - Model pattern matching and resolution."""

from roadrouter_core.routing.matcher import (
    PatternMatcher,
    WildcardMatcher,
    match,
    specificity,
)
from roadrouter_core.routing.table import DuplicateRuleError, Rule, RoutingTable
from roadrouter_core.routing.resolver import (
    MatchMethod,
    NoRouteFound,
    RouteMatch,
    RouteResolver,
    resolve,
)
from roadrouter_core.routing.router import Router

__all__ = [
    "PatternMatcher",
    "WildcardMatcher",
    "match",
    "specificity",
    "Rule",
    "RoutingTable",
    "DuplicateRuleError",
    "RouteResolver",
    "RouteMatch",
    "MatchMethod",
    "NoRouteFound",
    "resolve",
    "Router",
]
