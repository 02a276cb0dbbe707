"""
Core types for the SC graph search engine.

Paths, the step vocabulary applied to partial graphs, and the traversal
order knob. Configurations, driving info and extra info are opaque to
the engine and typed as ``Any`` throughout.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

# Type aliases
Path = tuple[int, ...]    # child indices from the root; () is the root
CoPath = tuple[int, ...]  # reversed Path, grown by prepending


def to_path(co_path: CoPath) -> Path:
    """Reverse a CoPath into the root-to-node Path."""
    return tuple(reversed(co_path))


def to_co_path(path: Path) -> CoPath:
    return tuple(reversed(path))


def path_key(path: Path) -> tuple[int, Path]:
    """
    Sort key implementing the total order on paths.

    Shorter paths come first; paths of equal length compare element-wise.
    """
    return (len(path), tuple(path))


def compare_paths(p1: Path, p2: Path) -> int:
    """Three-way comparison on paths: -1, 0 or +1."""
    k1, k2 = path_key(p1), path_key(p2)
    if k1 < k2:
        return -1
    if k1 > k2:
        return 1
    return 0


def is_prefix(prefix: Path, path: Path) -> bool:
    """True if ``path`` equals ``prefix`` or extends it."""
    return len(prefix) <= len(path) and tuple(path[:len(prefix)]) == tuple(prefix)


class TraversalOrder(str, Enum):
    """Where freshly created work is inserted into a pending list."""
    DEPTH_FIRST = "depth-first"      # insert at the front
    BREADTH_FIRST = "breadth-first"  # insert at the back


class StepKind(str, Enum):
    """Mutually exclusive steps a machine may apply to the active node."""
    COMPLETE = "complete"   # active node becomes a leaf
    EXPAND = "expand"       # active node gets children
    FOLD = "fold"           # active node becomes a loopback leaf
    REBUILD = "rebuild"     # replace active configuration, keep on frontier
    ROLLBACK = "rollback"   # regeneralize an ancestor, drop its subtree
    PRUNE = "prune"         # discard the whole partial graph


class SubStep(NamedTuple):
    """One child produced by driving: (configuration, driving info, extra info)."""
    conf: Any
    info: Any = None
    extra: Any = None


@dataclass(frozen=True)
class Step:
    """
    A step descriptor, applied uniformly by ``PartialCoGraph.add_step``.

    Only the payload fields relevant to ``kind`` are set; use the
    constructors below rather than building instances by hand.
    """
    kind: StepKind
    children: tuple[SubStep, ...] = ()
    target: Path | None = None
    conf: Any = None
    extra: Any = None
    node: Any = None  # CoNode to roll back to

    @classmethod
    def complete(cls) -> Step:
        return cls(StepKind.COMPLETE)

    @classmethod
    def expand(cls, children) -> Step:
        return cls(StepKind.EXPAND, children=tuple(SubStep(*c) for c in children))

    @classmethod
    def fold(cls, target: Path) -> Step:
        return cls(StepKind.FOLD, target=tuple(target))

    @classmethod
    def rebuild(cls, conf: Any, extra: Any = None) -> Step:
        return cls(StepKind.REBUILD, conf=conf, extra=extra)

    @classmethod
    def rollback(cls, node: Any, conf: Any, extra: Any = None) -> Step:
        return cls(StepKind.ROLLBACK, node=node, conf=conf, extra=extra)

    @classmethod
    def prune(cls) -> Step:
        return cls(StepKind.PRUNE)
