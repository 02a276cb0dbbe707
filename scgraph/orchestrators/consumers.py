"""
Stock graph consumers and folds over the lazy result sequence.

Consumers plug into ``CoGraphBuilder``; the fold helpers do the same job
over a ``CoGraphProducer`` (or any iterable of graphs), carrying an
explicit accumulator instead of shared mutable state.
"""

from __future__ import annotations
from functools import reduce
from typing import Any, Callable, Iterable, TypeVar

from ..graphs import Graph, PartialCoGraph
from .producer import CoGraphProducer

A = TypeVar("A")


class CollectingConsumer:
    """Keep every completed graph, count the pruned ones."""

    def __init__(self):
        self.graphs: list[Graph] = []
        self.pruned = 0

    def consume(self, graph: Graph | None) -> None:
        if graph is None:
            self.pruned += 1
        else:
            self.graphs.append(graph)

    def build_result(self) -> list[Graph]:
        return list(self.graphs)


class CountingConsumer:
    """Count completed and pruned graphs."""

    def __init__(self):
        self.completed = 0
        self.pruned = 0

    def consume(self, graph: Graph | None) -> None:
        if graph is None:
            self.pruned += 1
        else:
            self.completed += 1

    def build_result(self) -> tuple[int, int]:
        return (self.completed, self.pruned)


class MinimalGraphConsumer:
    """Select the smallest completed graph; the first one found wins ties."""

    def __init__(self):
        self.best: Graph | None = None
        self.best_size: int | None = None
        self.completed = 0
        self.pruned = 0

    def consume(self, graph: Graph | None) -> None:
        if graph is None:
            self.pruned += 1
            return
        self.completed += 1
        size = graph.size
        if self.best_size is None or size < self.best_size:
            self.best, self.best_size = graph, size

    def build_result(self) -> Graph | None:
        return self.best


def fold_graphs(graphs: Iterable[Any], initial: A, fn: Callable[[A, Any], A]) -> A:
    """Left fold over a (possibly lazy) sequence of graphs."""
    return reduce(fn, graphs, initial)


def _smaller(best: Graph | None, graph: Graph) -> Graph:
    if best is None or graph.size < best.size:
        return graph
    return best


def minimal_graph(graphs: CoGraphProducer | Iterable[Graph]) -> Graph | None:
    """Smallest completed graph of a producer or graph sequence."""
    if isinstance(graphs, CoGraphProducer):
        graphs = graphs.graphs()
    return fold_graphs(graphs, None, _smaller)


def count_results(producer: Iterable[PartialCoGraph]) -> tuple[int, int]:
    """Exhaust a producer, returning (completed, pruned)."""
    def step(acc: tuple[int, int], graph: PartialCoGraph) -> tuple[int, int]:
        completed, pruned = acc
        if graph.is_unworkable:
            return (completed, pruned + 1)
        return (completed + 1, pruned)

    return fold_graphs(producer, (0, 0), step)
