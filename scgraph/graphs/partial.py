"""
Partial SC graphs: the "work in progress" of a multi-result search.

A ``PartialCoGraph`` knows the already processed part of an SC graph
(``complete_leaves``, ``complete_nodes``) and the frontier of the
incomplete part (``incomplete_leaves``). The head of the frontier is the
active node; every step is applied to it and produces a brand new value.
Nothing is mutated in place, so alternative continuations of the same
value can be explored independently.

Traversal order
---------------
``add_child_nodes`` inserts new children in front of the remaining
frontier when ``order`` is ``TraversalOrder.DEPTH_FIRST`` (the default)
and behind it when ``order`` is ``TraversalOrder.BREADTH_FIRST``. This
is the only knob controlling the order in which nodes are processed.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator

from ..errors import GraphStateError
from ..types import Path, Step, StepKind, SubStep, TraversalOrder, is_prefix
from .cograph import CoEdge, CoNode


@dataclass(frozen=True)
class PartialCoGraph:
    """An immutable partial SC graph.

    Invariants: ``complete_leaves`` is a subset of ``complete_nodes``; the
    paths of all nodes across the three collections are pairwise distinct;
    an unworkable value is final.
    """
    incomplete_leaves: tuple[CoNode, ...]
    complete_leaves: tuple[CoNode, ...] = ()
    complete_nodes: tuple[CoNode, ...] = ()
    is_unworkable: bool = False
    order: TraversalOrder = TraversalOrder.DEPTH_FIRST

    @classmethod
    def start(
        cls,
        conf: Any,
        extra: Any = None,
        order: TraversalOrder = TraversalOrder.DEPTH_FIRST,
    ) -> PartialCoGraph:
        """A fresh partial graph holding only the root node."""
        return cls(incomplete_leaves=(CoNode(conf, extra),), order=TraversalOrder(order))

    @property
    def is_complete(self) -> bool:
        return not self.incomplete_leaves

    @property
    def current(self) -> CoNode | None:
        """The active node; None once the graph is complete."""
        return self.incomplete_leaves[0] if self.incomplete_leaves else None

    active = current

    @property
    def size(self) -> int:
        """Number of completed nodes."""
        return len(self.complete_nodes)

    def nodes(self) -> Iterator[CoNode]:
        """Every node in the graph, completed or not."""
        yield from self.complete_nodes
        yield from self.incomplete_leaves

    def find_complete(self, path: Path) -> CoNode | None:
        path = tuple(path)
        for node in self.complete_nodes:
            if node.path == path:
                return node
        return None

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _active(self) -> CoNode:
        if self.is_unworkable:
            raise GraphStateError("Cannot apply a step to an unworkable graph")
        if not self.incomplete_leaves:
            raise GraphStateError("Cannot apply a step to a complete graph: no active node")
        return self.incomplete_leaves[0]

    def convert_to_leaf(self) -> PartialCoGraph:
        """Move the active node into the complete part as a leaf."""
        node = self._active()
        return replace(
            self,
            incomplete_leaves=self.incomplete_leaves[1:],
            complete_leaves=(node,) + self.complete_leaves,
            complete_nodes=(node,) + self.complete_nodes,
        )

    def add_child_nodes(self, children: Iterable) -> PartialCoGraph:
        """Driving: give the active node children, one per (conf, info, extra)."""
        node = self._active()
        delta = tuple(
            CoNode(sub.conf, sub.extra, CoEdge(node, sub.info), None, (i,) + node.co_path)
            for i, sub in enumerate(SubStep(*c) for c in children)
        )
        rest = self.incomplete_leaves[1:]
        if self.order is TraversalOrder.BREADTH_FIRST:
            frontier = rest + delta
        else:
            frontier = delta + rest
        return replace(
            self,
            incomplete_leaves=frontier,
            complete_nodes=(node,) + self.complete_nodes,
        )

    def fold(self, base_path: Path) -> PartialCoGraph:
        """Turn the active node into a loopback to ``base_path``.

        ``base_path`` should name a completed node; this is not checked.
        """
        node = self._active().with_base(base_path)
        return replace(
            self,
            incomplete_leaves=self.incomplete_leaves[1:],
            complete_leaves=(node,) + self.complete_leaves,
            complete_nodes=(node,) + self.complete_nodes,
        )

    def rebuild(self, conf: Any, extra: Any = None) -> PartialCoGraph:
        """Replace the active configuration; the node stays on the frontier."""
        node = self._active().with_conf(conf, extra)
        return replace(self, incomplete_leaves=(node,) + self.incomplete_leaves[1:])

    def rollback(self, dang_node: CoNode, conf: Any, extra: Any = None) -> PartialCoGraph:
        """Regeneralize ``dang_node`` and discard everything built under it."""
        self._active()
        prefix = dang_node.path

        def keep(n: CoNode) -> bool:
            return not is_prefix(prefix, n.path)

        node = dang_node.with_conf(conf, extra)
        return replace(
            self,
            incomplete_leaves=(node,) + tuple(filter(keep, self.incomplete_leaves)),
            complete_leaves=tuple(filter(keep, self.complete_leaves)),
            complete_nodes=tuple(filter(keep, self.complete_nodes)),
        )

    def to_unworkable(self) -> PartialCoGraph:
        """Mark this graph as not good for further processing."""
        return replace(self, is_unworkable=True)

    def add_step(self, step: Step) -> PartialCoGraph:
        """Apply a step descriptor to the active node."""
        kind = step.kind
        if kind is StepKind.PRUNE:
            return self.to_unworkable()
        if kind is StepKind.COMPLETE:
            return self.convert_to_leaf()
        if kind is StepKind.EXPAND:
            return self.add_child_nodes(step.children)
        if kind is StepKind.FOLD:
            return self.fold(step.target)
        if kind is StepKind.REBUILD:
            return self.rebuild(step.conf, step.extra)
        if kind is StepKind.ROLLBACK:
            return self.rollback(step.node, step.conf, step.extra)
        raise GraphStateError(f"Unknown step kind: {kind!r}")
