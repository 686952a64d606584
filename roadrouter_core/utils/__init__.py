"""Utils module - Configuration loading."""

from roadrouter_core.utils.config import (
    RouterConfig,
    load_config,
)

__all__ = [
    "RouterConfig",
    "load_config",
]
