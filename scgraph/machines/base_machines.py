"""
Base machine classes and reusable policy mixins.

``GenericMultiMachine`` is the drive-or-fold-or-generalize skeleton shared
by supercompilation machines. Concrete machines mix in policies below (or
override the hooks directly) and supply only the per-configuration
relations those policies ask for.
"""

from __future__ import annotations
from typing import Any

from ..graphs import CoNode, PartialCoGraph
from ..interfaces import Machine, StepMachine
from ..types import Path


class GenericMultiMachine:
    """
    Control skeleton for multi-result machines.

    1. Unsafe active configuration: a single pruned graph.
    2. Fold target found: a single folded graph.
    3. Otherwise compute the whistle signal and return the driving
       continuations followed by the rebuilding continuations; both see
       the whistle.
    """

    def unsafe(self, graph: PartialCoGraph) -> bool:
        return False

    def can_fold(self, graph: PartialCoGraph) -> Path | None:
        return None

    def inspect(self, graph: PartialCoGraph) -> CoNode | None:
        """Whistle: the node to blame, or None if driving looks safe."""
        return None

    def drive(self, whistle: CoNode | None, graph: PartialCoGraph) -> list[PartialCoGraph]:
        raise NotImplementedError

    def rebuildings(self, whistle: CoNode | None, graph: PartialCoGraph) -> list[PartialCoGraph]:
        return []

    def steps(self, graph: PartialCoGraph) -> list[PartialCoGraph]:
        if self.unsafe(graph):
            return [graph.to_unworkable()]
        path = self.can_fold(graph)
        if path is not None:
            return [graph.fold(path)]
        whistle = self.inspect(graph)
        return list(self.drive(whistle, graph)) + list(self.rebuildings(whistle, graph))


class SafetyAware(GenericMultiMachine):
    """Prune as soon as the active configuration is unsafe."""

    def is_unsafe(self, conf: Any) -> bool:
        raise NotImplementedError

    def unsafe(self, graph: PartialCoGraph) -> bool:
        return self.is_unsafe(graph.current.conf)


class AncestorFolding(GenericMultiMachine):
    """Fold into the nearest ancestor the active configuration is foldable to."""

    def foldable(self, conf: Any, other: Any) -> bool:
        raise NotImplementedError

    def can_fold(self, graph: PartialCoGraph) -> Path | None:
        current = graph.current
        for ancestor in current.ancestors:
            if self.foldable(current.conf, ancestor.conf):
                return ancestor.path
        return None


class AnyNodeFolding(GenericMultiMachine):
    """Fold into any completed node, not only ancestors."""

    def foldable(self, conf: Any, other: Any) -> bool:
        raise NotImplementedError

    def can_fold(self, graph: PartialCoGraph) -> Path | None:
        conf = graph.current.conf
        for node in graph.complete_nodes:
            if node.base is None and self.foldable(conf, node.conf):
                return node.path
        return None


class UnaryWhistle(GenericMultiMachine):
    """Whistle on the active node whenever its configuration is dubious."""

    def dubious(self, conf: Any) -> bool:
        raise NotImplementedError

    def inspect(self, graph: PartialCoGraph) -> CoNode | None:
        current = graph.current
        return current if self.dubious(current.conf) else None


class CurrentGensOnWhistle(UnaryWhistle):
    """Generalize the active configuration, but only once the whistle blew."""

    def generalizations(self, conf: Any) -> list[Any]:
        raise NotImplementedError

    def rebuildings(self, whistle: CoNode | None, graph: PartialCoGraph) -> list[PartialCoGraph]:
        if whistle is None:
            return []
        return _rebuild_all(self, graph)


class GensWithUnaryWhistle(UnaryWhistle):
    """Always offer generalizations of the active configuration."""

    def generalizations(self, conf: Any) -> list[Any]:
        raise NotImplementedError

    def rebuildings(self, whistle: CoNode | None, graph: PartialCoGraph) -> list[PartialCoGraph]:
        return _rebuild_all(self, graph)


def _rebuild_all(machine, graph: PartialCoGraph) -> list[PartialCoGraph]:
    candidates = machine.generalizations(graph.current.conf)
    return [graph.rebuild(conf) for conf in candidates if not machine.dubious(conf)]


class RuleDriving(GenericMultiMachine):
    """
    Drive by a set of rewrite rules.

    ``rewrite`` returns one entry per rule: the successor configuration, or
    None where the rule does not apply. Children are labeled with the
    1-based rule number.
    """

    def rewrite(self, conf: Any) -> list[Any | None]:
        raise NotImplementedError

    def drive(self, whistle: CoNode | None, graph: PartialCoGraph) -> list[PartialCoGraph]:
        if whistle is not None:
            return [graph.to_unworkable()]
        children = [
            (succ, i + 1, None)
            for i, succ in enumerate(self.rewrite(graph.current.conf))
            if succ is not None
        ]
        if not children:
            return [graph.convert_to_leaf()]
        return [graph.add_child_nodes(children)]


class StepMachineAdapter:
    """Turn a ``StepMachine`` into a ``Machine`` by applying each step."""

    def __init__(self, step_machine: StepMachine):
        self.step_machine = step_machine

    def steps(self, graph: PartialCoGraph) -> list[PartialCoGraph]:
        return [graph.add_step(step) for step in self.step_machine.step_list(graph)]


class BoundedMachine:
    """
    Resource budget around another machine.

    Any partial graph with more than ``max_size`` completed nodes is pruned
    instead of being handed to the wrapped machine. ``max_size`` may be
    lowered during a search (e.g. to the size of the best graph found so far).
    """

    def __init__(self, machine: Machine, max_size: int):
        self.machine = machine
        self.max_size = max_size

    def steps(self, graph: PartialCoGraph) -> list[PartialCoGraph]:
        if graph.size > self.max_size:
            return [graph.to_unworkable()]
        return self.machine.steps(graph)
