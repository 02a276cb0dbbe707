"""
Test Suite for Machines

Tests the GenericMultiMachine control skeleton and its policy mixins:
- Prune on unsafe, fold before driving, whistle-driven generalization
- Ancestor-only vs any-node folding
- Rule driving labels
- Step-descriptor machines and resource budgets
"""

import pytest

from scgraph import (
    AncestorFolding, BoundedMachine, CoGraphProducer, GenericMultiMachine, GensWithUnaryWhistle,
    PartialCoGraph, Step, StepMachineAdapter, transpose,
)

from conftest import CountingUpMachine, GuardedChoiceMachine, RepeatingMachine, SharedLeafMachine


def drive_to(machine, start, choose=0, max_steps=50):
    """Follow the ``choose``-th alternative at every step until the graph settles."""
    graph = PartialCoGraph.start(start)
    for _ in range(max_steps):
        if graph.is_complete or graph.is_unworkable:
            return graph
        graph = machine.steps(graph)[choose]
    raise AssertionError("search did not settle")


class TestGenericSkeleton:
    """Test the drive-or-fold-or-generalize skeleton."""

    def test_drive_is_required(self):
        with pytest.raises(NotImplementedError):
            GenericMultiMachine().steps(PartialCoGraph.start("c"))

    def test_unsafe_yields_single_pruned_graph(self):
        machine = GuardedChoiceMachine()
        g = PartialCoGraph.start("ab")
        [result] = machine.steps(g)
        assert result.is_unworkable

    def test_fold_wins_over_driving(self):
        machine = RepeatingMachine()
        g = PartialCoGraph.start("X0").add_child_nodes([("X0", None, None)])
        [result] = machine.steps(g)
        assert result.complete_leaves[0].base == ()

    def test_whistle_yields_prune_and_rebuildings(self):
        machine = CountingUpMachine()
        g = PartialCoGraph.start(3)
        results = machine.steps(g)
        assert len(results) == 2
        assert results[0].is_unworkable
        assert results[1].current.conf == "*"
        assert not results[1].is_unworkable

    def test_dubious_generalizations_are_filtered(self):
        machine = CountingUpMachine()
        results = machine.steps(PartialCoGraph.start(5))
        assert [r.current.conf for r in results if not r.is_unworkable] == ["*"]

    def test_no_rebuildings_without_whistle(self):
        machine = CountingUpMachine()
        [result] = machine.steps(PartialCoGraph.start(1))
        assert result.incomplete_leaves[0].conf == 2


class TestRuleDriving:
    """Test rewrite-rule driving."""

    def test_labels_are_rule_numbers(self):
        [result] = CountingUpMachine().steps(PartialCoGraph.start(0))
        child = result.current
        assert child.conf == 1
        assert child.label == 2

    def test_no_applicable_rule_completes(self):
        [result] = CountingUpMachine().steps(PartialCoGraph.start(-1))
        assert result.is_complete
        assert [n.conf for n in result.complete_leaves] == [-1]

    def test_generalized_search_folds(self):
        producer = CoGraphProducer(0, CountingUpMachine())
        results = list(producer)
        assert producer.pruned == 1
        [complete] = [g for g in results if not g.is_unworkable]
        tree = transpose(complete)
        assert [n.conf for n in tree.nodes()] == [0, 1, 2, "*", "*"]
        [loop] = tree.loopbacks()
        assert loop.base == (0, 0, 0)
        assert tree.resolve(loop).conf == "*"


class TestFoldingPolicies:
    """Test ancestor-only and any-node folding."""

    def test_ancestor_fold_path_is_on_ancestor_chain(self):
        graph = drive_to(RepeatingMachine(), "X")
        [loop] = [n for n in graph.complete_leaves if n.is_loopback]
        folded_from = graph.find_complete(loop.path)
        assert loop.base in [a.path for a in folded_from.ancestors]

    def test_ancestor_folding_ignores_siblings(self):
        class SiblingBlind(AncestorFolding, GenericMultiMachine):
            def foldable(self, conf, other):
                return conf == other

            def drive(self, whistle, graph):
                if graph.current.conf == "r":
                    return [graph.add_child_nodes([("s", None, None), ("s", None, None)])]
                return [graph.convert_to_leaf()]

        graph = drive_to(SiblingBlind(), "r")
        assert not any(n.is_loopback for n in graph.complete_leaves)

    def test_any_node_folding_reaches_completed_non_ancestor(self):
        graph = drive_to(SharedLeafMachine(), "r")
        [loop] = [n for n in graph.complete_leaves if n.is_loopback]
        assert loop.path == (1, 0)
        assert loop.base == (0,)
        assert loop.base not in [a.path for a in loop.ancestors]


class TestGensWithUnaryWhistle:
    """Test unconditional generalization."""

    def test_rebuildings_offered_without_whistle(self):
        class AlwaysGeneralize(GensWithUnaryWhistle):
            def dubious(self, conf):
                return conf == "bad"

            def generalizations(self, conf):
                return ["g1", "bad", "g2"]

            def drive(self, whistle, graph):
                return [graph.convert_to_leaf()]

        results = AlwaysGeneralize().steps(PartialCoGraph.start("c"))
        assert results[0].is_complete
        assert [r.current.conf for r in results[1:]] == ["g1", "g2"]


class TestStepMachineAdapter:
    """Test the decoupled step-descriptor variant."""

    def test_steps_are_applied(self):
        class Describer:
            def step_list(self, graph):
                conf = graph.current.conf
                if conf == "root":
                    return [Step.expand([("kid", "edge", None)]), Step.prune()]
                if conf == "kid":
                    return [Step.fold(())]
                return []

        producer = CoGraphProducer("root", StepMachineAdapter(Describer()))
        results = list(producer)
        assert producer.pruned == 1
        [complete] = [g for g in results if not g.is_unworkable]
        tree = transpose(complete)
        assert tree.get((0,)).base == ()
        assert tree.get((0,)).label == "edge"

    def test_rebuild_and_rollback_descriptors(self):
        class Generalizer:
            def step_list(self, graph):
                node = graph.current
                if node.conf == "r":
                    return [Step.expand([("a", None, None)])]
                if node.conf == "a":
                    return [Step.rollback(node.parent, "r*")]
                if node.conf == "r*":
                    return [Step.rebuild("done")]
                return [Step.complete()]

        [graph] = list(CoGraphProducer("r", StepMachineAdapter(Generalizer())))
        tree = transpose(graph)
        assert tree.size == 1
        assert tree.root.conf == "done"


class TestBoundedMachine:
    """Test resource budgets."""

    def test_budget_can_be_lowered(self):
        machine = BoundedMachine(CountingUpMachine(), max_size=10)
        g = PartialCoGraph.start(0)
        for _ in range(2):
            [g] = machine.steps(g)
        machine.max_size = 1
        [result] = machine.steps(g)
        assert result.is_unworkable
