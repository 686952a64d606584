"""RoadRouter - Model routing for RoadGateway.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

RoadRouter maps a requested model identifier to the target model that
should serve it, using a table of exact and wildcard rules:
- Wildcard patterns (gpt-4*, claude-*-sonnet-*, *thinking*)
- Specificity ranking (more literal characters wins)
- Deterministic tie-breaking (smallest pattern wins)
- Fallback target when nothing matches
- Lock-free resolution over immutable table snapshots

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              RoadRouter                                     │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│  Config ──▶ RoutingTable ──▶ Router ──▶ RouteResolver ──▶ PatternMatcher    │
│  (file/env)  (snapshot)     (swap)      (rank + tie)      (wildcards)       │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Resolution:
1. Every rule whose pattern matches the model is a candidate
2. No candidate: return the fallback (or raise NoRouteFound)
3. Highest specificity wins: len(pattern) - count("*")
4. Equal specificity: lexicographically smallest pattern wins

Usage:
    from roadrouter_core import Router

    router = Router(
        {
            "gpt*": "gpt-4o-mini",
            "gpt-4*": "gpt-4o",
            "claude-*-sonnet-*": "claude-sonnet-4",
        },
        fallback="local-llama",
    )

    router.resolve("gpt-4-turbo")     # "gpt-4o"
    router.resolve("mistral-large")   # "local-llama"
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Routing
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

# Utils
from roadrouter_core.utils.config import RouterConfig, load_config

__all__ = [
    # Version
    "__version__",
    # Routing
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
    # Utils
    "RouterConfig",
    "load_config",
]
