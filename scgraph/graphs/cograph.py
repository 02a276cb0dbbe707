"""
Parent-pointer SC graphs.

A ``CoNode`` knows its incoming edge, so ancestor queries are cheap and
independently growing subtrees can share a common ancestor chain. Nodes
are immutable; replacing a node means building a sibling value at the
same coordinate.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Any

from ..types import CoPath, Path, to_path


@dataclass(frozen=True, eq=False)
class CoEdge:
    """Labeled edge to a parent node. ``label`` is the driving info."""
    node: CoNode
    label: Any = None


@dataclass(frozen=True, eq=False)
class CoNode:
    """A node in a parent-pointer graph. ``in_edge`` is None only at the root."""
    conf: Any
    extra: Any = None
    in_edge: CoEdge | None = field(default=None, repr=False)
    base: Path | None = None
    co_path: CoPath = ()

    @cached_property
    def path(self) -> Path:
        return to_path(self.co_path)

    @property
    def parent(self) -> CoNode | None:
        return self.in_edge.node if self.in_edge is not None else None

    @property
    def label(self) -> Any:
        """Driving info of the incoming edge."""
        return self.in_edge.label if self.in_edge is not None else None

    @property
    def ancestors(self) -> list[CoNode]:
        """Ancestors ordered parent -> grandparent -> root."""
        result = []
        current = self.parent
        while current is not None:
            result.append(current)
            current = current.parent
        return result

    @property
    def is_loopback(self) -> bool:
        return self.base is not None

    def with_conf(self, conf: Any, extra: Any = None) -> CoNode:
        """Same coordinate and incoming edge, new configuration, no loopback."""
        return replace(self, conf=conf, extra=extra, base=None)

    def with_base(self, base: Path) -> CoNode:
        return replace(self, base=tuple(base))


@dataclass(frozen=True)
class CoGraph:
    """A completed parent-pointer graph; ``nodes`` are sorted by path."""
    root: CoNode
    leaves: tuple[CoNode, ...]
    nodes: tuple[CoNode, ...]
