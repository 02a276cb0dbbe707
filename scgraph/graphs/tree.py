"""
Child-pointer SC Graphs
=======================

Top-down form of a completed SC graph: a tree whose nodes know their
outgoing edges, some leaves of which carry a loopback ``base`` path naming
an earlier node. Built on ``anytree`` so consumers get the usual tree
iteration and rendering helpers for free.
"""

from __future__ import annotations

from typing import Any, Iterator, NamedTuple

from anytree import NodeMixin, PreOrderIter, RenderTree

from ..errors import PathNotFoundError
from ..types import CoPath, Path, to_co_path


class Edge(NamedTuple):
    """Labeled out-edge; ``label`` is the driving info."""
    node: "Node"
    label: Any


class Node(NodeMixin):
    """
    Tree node of a child-pointer graph.

    Children are kept in child-index order. The driving info of the edge
    leading into this node is stored on the node itself as ``label``.
    ``index_path`` is the node's Path (anytree reserves ``path`` for the
    tuple of nodes from the root).
    """

    def __init__(
        self,
        conf: Any,
        extra: Any = None,
        label: Any = None,
        base: Path | None = None,
        index_path: Path = (),
        parent: Node | None = None,
    ):
        super().__init__()
        self.conf = conf
        self.extra = extra
        self.label = label
        self.base = tuple(base) if base is not None else None
        self.index_path = tuple(index_path)
        self.parent = parent

    @property
    def co_path(self) -> CoPath:
        return to_co_path(self.index_path)

    @property
    def outs(self) -> list[Edge]:
        return [Edge(child, child.label) for child in self.children]

    @property
    def is_loopback(self) -> bool:
        return self.base is not None

    def get(self, rel_path: Path) -> Node:
        """Follow child indices from this node."""
        node = self
        for depth, index in enumerate(rel_path):
            if node.is_loopback or not 0 <= index < len(node.children):
                raise PathNotFoundError(tuple(self.index_path) + tuple(rel_path[:depth + 1]))
            node = node.children[index]
        return node

    def structure(self) -> tuple:
        """Nested tuple used for structural comparison of graphs."""
        return (
            self.conf,
            self.label,
            self.base,
            tuple(child.structure() for child in self.children),
        )

    def __repr__(self) -> str:
        suffix = f" -> {list(self.base)}" if self.base is not None else ""
        return f"Node({self.conf!r} @ {list(self.index_path)}{suffix})"


class Graph:
    """A completed SC graph in child-pointer form."""

    def __init__(self, root: Node, leaves: list[Node] | None = None):
        self.root = root
        if leaves is None:
            leaves = [n for n in PreOrderIter(root) if not n.children]
        self.leaves = list(leaves)

    def get(self, path: Path) -> Node:
        """Node at ``path``; raises ``PathNotFoundError`` if absent."""
        return self.root.get(path)

    def resolve(self, node: Node) -> Node:
        """Target of a loopback leaf."""
        if node.base is None:
            raise PathNotFoundError(node.index_path, f"Node at {list(node.index_path)} is not a loopback")
        return self.get(node.base)

    def nodes(self) -> Iterator[Node]:
        """All nodes in depth-first, left-to-right order."""
        return PreOrderIter(self.root)

    def loopbacks(self) -> list[Node]:
        return [n for n in self.leaves if n.is_loopback]

    @property
    def size(self) -> int:
        return sum(1 for _ in PreOrderIter(self.root))

    def structure(self) -> tuple:
        return self.root.structure()

    def render(self) -> str:
        """Plain text dump of the tree, one node per line."""
        lines = []
        for pre, _, node in RenderTree(self.root):
            label = f"[{node.label}] " if node.label is not None else ""
            base = f" => {list(node.base)}" if node.base is not None else ""
            lines.append(f"{pre}{label}{node.conf}{base}")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.structure() == other.structure()

    def __hash__(self) -> int:
        """Hash of ``structure()``; raises TypeError if a conf or label is unhashable."""
        return hash(self.structure())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Graph(root={self.root.conf!r}, size={self.size})"
