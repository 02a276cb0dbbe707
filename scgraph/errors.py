"""
Exceptions raised by the SC graph engine.
"""


class SCGraphError(Exception):
    """Base class for all engine errors."""


class GraphStateError(SCGraphError):
    """A step or transformation was applied to a graph that cannot accept it.

    Signals a broken machine implementation rather than a recoverable
    runtime condition.
    """


class SearchExhaustedError(SCGraphError):
    """The lazy producer was asked for a graph when none remain."""


class PathNotFoundError(SCGraphError, LookupError):
    """No node lives at the requested path of a child-pointer graph."""

    def __init__(self, path, message: str | None = None):
        self.path = tuple(path)
        super().__init__(message or f"No node at path {list(self.path)}")


class ConfigError(SCGraphError, ValueError):
    """Unknown or invalid configuration value."""
