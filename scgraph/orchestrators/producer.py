"""
Lazy, pull-style SC graph producer.

The producer is an external iterator over the results of a multi-result
search: it keeps a pending list of partial graphs, seeded with the start
graph, and only expands it as far as needed to surface the next complete
or unworkable graph. The search space may be infinite, so callers are
free to stop pulling at any point.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterator

from ..config import SearchConfig, get_search_config
from ..errors import SearchExhaustedError
from ..graphs import Graph, PartialCoGraph
from ..interfaces import Machine
from ..transforms import transpose
from ..types import TraversalOrder

logger = logging.getLogger(__name__)


class CoGraphProducer:
    """
    Iterator producing partial graphs on demand.

    Every value returned is either complete or unworkable; check
    ``is_unworkable`` to tell discarded branches from results. Successors
    returned by the machine replace their parent at the front of the
    pending list for depth-first search, or join its back for
    breadth-first search (``config.traversal``).
    """

    def __init__(
        self,
        conf: Any,
        machine: Machine,
        extra: Any = None,
        config: SearchConfig | None = None,
    ):
        self.machine = machine
        self.config = config or get_search_config()
        self.completed = 0
        self.pruned = 0
        self.steps_taken = 0
        start = PartialCoGraph.start(conf, extra, order=self.config.traversal)
        self._pending: deque[PartialCoGraph] = deque([start])

    @property
    def pending(self) -> int:
        """Number of partial graphs waiting in the pending list."""
        return len(self._pending)

    def _schedule(self, graphs: list[PartialCoGraph]) -> None:
        if self.config.traversal is TraversalOrder.BREADTH_FIRST:
            self._pending.extend(graphs)
        else:
            self._pending.extendleft(reversed(graphs))

    def _normalize(self) -> None:
        while self._pending:
            head = self._pending[0]
            if head.is_complete or head.is_unworkable:
                return
            successors = list(self.machine.steps(head))
            self._pending.popleft()
            self.steps_taken += 1
            if self.config.trace_steps:
                logger.debug(
                    "step %d: active=%r at %s -> %d successor(s)",
                    self.steps_taken, head.current.conf, list(head.current.path), len(successors),
                )
            if not successors:
                logger.warning(
                    "Machine returned no successors for node at %s; branch dropped",
                    list(head.current.path),
                )
            self._schedule(successors)

    def has_next(self) -> bool:
        self._normalize()
        return bool(self._pending)

    def next_graph(self) -> PartialCoGraph:
        """Pop the next complete or unworkable graph."""
        if not self.has_next():
            raise SearchExhaustedError("no cograph: search is exhausted")
        graph = self._pending.popleft()
        if graph.is_unworkable:
            self.pruned += 1
        else:
            self.completed += 1
        return graph

    def __iter__(self) -> Iterator[PartialCoGraph]:
        return self

    def __next__(self) -> PartialCoGraph:
        if not self.has_next():
            logger.info(
                "Search exhausted: %d complete, %d pruned, %d steps",
                self.completed, self.pruned, self.steps_taken,
            )
            raise StopIteration
        return self.next_graph()

    def graphs(self) -> Iterator[Graph]:
        """Transposed complete graphs only; pruned branches are skipped."""
        for graph in self:
            if not graph.is_unworkable:
                yield transpose(graph)
