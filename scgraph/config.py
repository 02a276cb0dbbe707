"""
Search Configuration Settings

Runtime settings for the SC graph drivers. Values default from environment
variables and can be overridden at runtime or per driver instance.
"""

from __future__ import annotations

import logging
import os

from .errors import ConfigError
from .types import TraversalOrder

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SearchConfig:
    """Configuration for the search drivers."""

    def __init__(self, **overrides):
        self.traversal: TraversalOrder = _parse_traversal(
            os.getenv("SCGRAPH_TRAVERSAL", TraversalOrder.DEPTH_FIRST.value)
        )
        self.log_level: str = os.getenv("SCGRAPH_LOG_LEVEL", "WARNING").upper()
        # Per-step debug logging in the drivers
        self.trace_steps: bool = os.getenv("SCGRAPH_TRACE", "false").lower() == "true"
        if overrides:
            self.update(**overrides)

    def update(self, **kwargs) -> 'SearchConfig':
        """Update configuration values at runtime."""
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise ConfigError(f"Unknown configuration parameter: {key}")
            if key == "traversal":
                value = _parse_traversal(value)
            elif key == "log_level":
                value = str(value).upper()
            setattr(self, key, value)
        return self

    def validate(self) -> bool:
        """Validate the current configuration values."""
        if not isinstance(self.traversal, TraversalOrder):
            raise ConfigError(f"Invalid traversal order: {self.traversal!r}")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level!r}")
        return True

    def copy(self) -> 'SearchConfig':
        clone = SearchConfig.__new__(SearchConfig)
        clone.__dict__.update(self.__dict__)
        return clone

    def __repr__(self) -> str:
        return (
            f"SearchConfig(traversal={self.traversal.value!r}, "
            f"log_level={self.log_level!r}, trace_steps={self.trace_steps!r})"
        )


def _parse_traversal(value) -> TraversalOrder:
    if isinstance(value, TraversalOrder):
        return value
    try:
        return TraversalOrder(str(value).strip().lower())
    except ValueError:
        raise ConfigError(
            f"Invalid traversal order {value!r}; expected one of "
            f"{[t.value for t in TraversalOrder]}"
        ) from None


# Global configuration instance
config = SearchConfig()


def set_search_config(**kwargs) -> SearchConfig:
    """Convenience function to update global configuration."""
    return config.update(**kwargs)


def get_search_config() -> SearchConfig:
    """Get the global configuration instance."""
    return config


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger at the configured level."""
    level_name = (level or config.log_level).upper()
    if level_name not in _LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {level_name!r}")
    pkg_logger = logging.getLogger("scgraph")
    if not any(getattr(h, "_scgraph_handler", False) for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
        handler._scgraph_handler = True
        pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(getattr(logging, level_name))
    return pkg_logger
