"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

from roadrouter_core.routing.table import RoutingTable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RouterConfig")

ROUTE_ENV_KEY = "ROUTE_"


def _parse_routes(routes: Any) -> Dict[str, str]:
    """Validate routes given as a mapping or a list of rule objects.

    Raises:
        TypeError: If a pattern or target is not a string
        DuplicateRuleError: If the list form repeats a pattern
    """
    if routes is None:
        return {}
    if isinstance(routes, dict):
        return RoutingTable.from_dict(routes).to_dict()
    if isinstance(routes, str):
        raise TypeError("routes must be a mapping or a list of rules")

    return RoutingTable.from_rules(
        (entry["pattern"], entry["target"]) for entry in routes
    ).to_dict()


@dataclass
class RouterConfig:
    """Model router configuration."""

    # Pattern -> target model
    routes: Dict[str, str] = field(default_factory=dict)

    # Target used when no pattern matches
    fallback: Optional[str] = None

    # Level for the roadrouter_core logger, None leaves it alone
    log_level: Optional[str] = None

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        if "routes" in filtered:
            filtered["routes"] = _parse_routes(filtered["routes"])
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        try:
            import yaml
        except ImportError:
            raise ImportError("PyYAML required for YAML config")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_env(cls: Type[T], prefix: str = "ROADROUTER_") -> T:
        """Load config from environment variables.

        Routes are read from ``<prefix>ROUTE_<name>=<pattern>=<target>``;
        the part after the first ``=`` in the value is the target. Both
        are kept verbatim, whitespace included.
        """
        data: Dict[str, Any] = {}
        routes: Dict[str, str] = {}

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):]
            if config_key.startswith(ROUTE_ENV_KEY):
                pattern, sep, target = value.partition("=")
                if not sep:
                    logger.warning(f"Ignoring malformed route in {key}: {value!r}")
                    continue
                routes[pattern] = target
            elif config_key == "ROUTES":
                logger.warning(f"Ignoring {key}, use {prefix}{ROUTE_ENV_KEY}<name> entries")
            else:
                data[config_key.lower()] = value

        if routes:
            data["routes"] = routes

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "routes": dict(self.routes),
            "fallback": self.fallback,
            "log_level": self.log_level,
        }

    def merge(self, other: "RouterConfig") -> "RouterConfig":
        """Merge with another config (other takes precedence)."""
        routes = dict(self.routes)
        routes.update(other.routes)
        return RouterConfig(
            routes=routes,
            fallback=other.fallback if other.fallback is not None else self.fallback,
            log_level=other.log_level if other.log_level is not None else self.log_level,
        )

    def configure_logging(self) -> None:
        """Apply log_level to the package logger."""
        if self.log_level:
            logging.getLogger("roadrouter_core").setLevel(self.log_level.upper())


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "ROADROUTER_",
) -> RouterConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = RouterConfig()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = RouterConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = RouterConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    env_config = RouterConfig.from_env(env_prefix)
    config = config.merge(env_config)

    return config


__all__ = [
    "RouterConfig",
    "load_config",
]
