"""
Shared fixtures and toy machines for the scgraph test suite.

The machines here only exist to exercise the engine; they implement no
real object-language semantics.
"""

import pytest

from scgraph import (
    AncestorFolding,
    AnyNodeFolding,
    CurrentGensOnWhistle,
    GenericMultiMachine,
    PartialCoGraph,
    RuleDriving,
    SafetyAware,
    SearchConfig,
    TraversalOrder,
)


class BinaryStringMachine:
    """Expand strings shorter than 3 into conf+"0" / conf+"1", complete the rest."""

    def steps(self, graph: PartialCoGraph) -> list[PartialCoGraph]:
        conf = graph.current.conf
        if len(conf) < 3:
            return [graph.add_child_nodes([
                (conf + "0", "label0", "extra0"),
                (conf + "1", "label1", "extra1"),
            ])]
        return [graph.convert_to_leaf()]


class RepeatingMachine(AncestorFolding, GenericMultiMachine):
    """Drives "X" to "X0"/"X1"; "X0" keeps re-emitting "X0"; everything else is a leaf."""

    def foldable(self, conf, other):
        return conf == other

    def drive(self, whistle, graph):
        conf = graph.current.conf
        if conf == "X":
            return [graph.add_child_nodes([("X0", "left", None), ("X1", "right", None)])]
        if conf == "X0":
            return [graph.add_child_nodes([("X0", "again", None)])]
        return [graph.convert_to_leaf()]


class ChoiceMachine(GenericMultiMachine):
    """
    Two alternatives for every configuration shorter than 2: stop here, or
    branch into conf+"a" / conf+"b". Starting from "" this yields 5 graphs of
    sizes 1, 3, 5, 5 and 7.
    """

    def drive(self, whistle, graph):
        conf = graph.current.conf
        if len(conf) >= 2:
            return [graph.convert_to_leaf()]
        return [
            graph.convert_to_leaf(),
            graph.add_child_nodes([(conf + "a", "a", None), (conf + "b", "b", None)]),
        ]


class GuardedChoiceMachine(SafetyAware, ChoiceMachine):
    """``ChoiceMachine`` that prunes any graph reaching "ab"."""

    def is_unsafe(self, conf):
        return conf == "ab"


class CountingUpMachine(AncestorFolding, CurrentGensOnWhistle, RuleDriving):
    """
    Integers count up by one; from 3 on they are dubious and get generalized
    to "*", which rewrites to itself and so folds back.
    """

    def foldable(self, conf, other):
        return conf == other

    def dubious(self, conf):
        return isinstance(conf, int) and conf >= 3

    def generalizations(self, conf):
        return ["*", 99]

    def rewrite(self, conf):
        if conf == "*":
            return ["*"]
        if conf < 0:
            return [None, None]
        return [None, conf + 1]


class SharedLeafMachine(AnyNodeFolding, GenericMultiMachine):
    """Drives "r" to "x"/"y" and "y" to "x" again, which folds to the first "x"."""

    def foldable(self, conf, other):
        return conf == other

    def drive(self, whistle, graph):
        conf = graph.current.conf
        if conf == "r":
            return [graph.add_child_nodes([("x", 0, None), ("y", 1, None)])]
        if conf == "y":
            return [graph.add_child_nodes([("x", 0, None)])]
        return [graph.convert_to_leaf()]


class StallingMachine:
    """Violates the machine contract by returning no successors."""

    def steps(self, graph):
        return []


def check_partition(graph: PartialCoGraph) -> None:
    """Assert the partition invariant of a partial graph."""
    complete_ids = {id(n) for n in graph.complete_nodes}
    assert all(id(n) in complete_ids for n in graph.complete_leaves)
    paths = [n.path for n in graph.nodes()]
    assert len(paths) == len(set(paths))


class InvariantCheckingMachine:
    """Wraps a machine and checks the partition invariant around every call."""

    def __init__(self, machine):
        self.machine = machine
        self.calls = 0

    def steps(self, graph):
        self.calls += 1
        check_partition(graph)
        successors = self.machine.steps(graph)
        for succ in successors:
            check_partition(succ)
        return successors


@pytest.fixture
def depth_first():
    return SearchConfig(traversal=TraversalOrder.DEPTH_FIRST, trace_steps=True)


@pytest.fixture
def breadth_first():
    return SearchConfig(traversal=TraversalOrder.BREADTH_FIRST)


@pytest.fixture
def expanded_graph():
    """Partial graph with root "r" expanded into "a", "b", and "a" expanded into "a0"."""
    g = PartialCoGraph.start("r", "root-extra")
    g = g.add_child_nodes([("a", "to-a", None), ("b", "to-b", None)])
    g = g.add_child_nodes([("a0", "to-a0", None)])
    return g
