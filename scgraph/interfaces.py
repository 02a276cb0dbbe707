"""
Core interfaces for the SC graph search engine.

These protocols define the contracts between the engine and its clients:
- Machine / StepMachine: the non-deterministic stepping policy
- GraphConsumer: what to do with completed (or pruned) graphs
"""

from __future__ import annotations
from typing import Any, Protocol

from .graphs import Graph, PartialCoGraph
from .types import Step


class Machine(Protocol):
    """
    Protocol for abstract machines driving a multi-result search.

    A machine encodes the (meta-)semantics of the object language as
    operations over SC graphs. Must be pure: given a partial graph that is
    neither complete nor unworkable, return every alternative next graph.
    Returning more than one graph branches the search. Returning none is a
    contract violation (the drivers drop the branch with a warning); discard
    branches with an explicit prune instead.
    """

    def steps(self, graph: PartialCoGraph) -> list[PartialCoGraph]:
        """All alternative successors of ``graph``."""
        ...


class StepMachine(Protocol):
    """
    Decoupled machine variant: returns step descriptors instead of graphs.

    The steps are applied uniformly by ``StepMachineAdapter``.
    """

    def step_list(self, graph: PartialCoGraph) -> list[Step]:
        """All alternative steps for the active node of ``graph``."""
        ...


class GraphConsumer(Protocol):
    """
    Protocol for result consumers of the push-style builder.

    ``consume`` is called once per completed graph (with the transposed
    graph) and once per pruned branch (with None). ``build_result`` is called
    once after the search is exhausted.
    """

    def consume(self, graph: Graph | None) -> None:
        ...

    def build_result(self) -> Any:
        ...
