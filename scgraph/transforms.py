"""
Transformations of completed SC graphs.

Transposition turns a completed parent-pointer graph into the dual
child-pointer tree that every downstream consumer works on (residuation,
size computation, printing, safety checking).
"""

from __future__ import annotations
from typing import Any, Callable

from .errors import GraphStateError
from .graphs import CoGraph, Graph, Node, PartialCoGraph
from .types import path_key


def _sorted_nodes(graph: PartialCoGraph):
    if not graph.is_complete:
        raise GraphStateError("Only a complete graph can be transposed")
    if graph.is_unworkable:
        raise GraphStateError("An unworkable graph cannot be transposed")
    if not graph.complete_nodes:
        raise GraphStateError("Complete graph has no nodes")
    return sorted(graph.complete_nodes, key=lambda n: path_key(n.path))


def to_cograph(graph: PartialCoGraph) -> CoGraph:
    """Freeze a complete partial graph into a ``CoGraph`` with nodes in path order."""
    ordered = _sorted_nodes(graph)
    leaves = tuple(sorted(graph.complete_leaves, key=lambda n: path_key(n.path)))
    return CoGraph(root=ordered[0], leaves=leaves, nodes=tuple(ordered))


def transpose(graph: PartialCoGraph | CoGraph) -> Graph:
    """
    Convert a completed parent-pointer graph into child-pointer form.

    Nodes are attached in path order, so the children of every node end
    up in increasing child-index order. Loopback bases are copied verbatim.
    """
    if isinstance(graph, CoGraph):
        ordered = list(graph.nodes)
        co_leaves = graph.leaves
    else:
        ordered = _sorted_nodes(graph)
        co_leaves = graph.complete_leaves

    by_path: dict[tuple[int, ...], Node] = {}
    for co_node in ordered:
        path = co_node.path
        parent = None
        if path:
            parent = by_path.get(path[:-1])
            if parent is None:
                raise GraphStateError(f"Node at {list(path)} has no parent in the graph")
        node = Node(
            co_node.conf,
            extra=co_node.extra,
            label=co_node.label,
            base=co_node.base,
            index_path=path,
            parent=parent,
        )
        by_path[path] = node
    root = by_path[ordered[0].path]
    if root.index_path != ():
        raise GraphStateError("Complete graph has no root node")
    # Completed leaves only; a node expanded into no children stays internal.
    leaves = [by_path[p] for p in sorted((n.path for n in co_leaves), key=path_key)]
    return Graph(root, leaves)


def graph_size(graph: Graph | PartialCoGraph) -> int:
    """Number of nodes in a completed graph of either form."""
    return graph.size


def check_subtree(is_unsafe: Callable[[Any], bool], node: Node) -> bool:
    """True if no configuration in the subtree rooted at ``node`` is unsafe."""
    if is_unsafe(node.conf):
        return False
    return all(check_subtree(is_unsafe, child) for child in node.children)


def is_safe(graph: Graph, is_unsafe: Callable[[Any], bool]) -> bool:
    """Whether ``graph`` certifies that no unsafe configuration is reachable."""
    return check_subtree(is_unsafe, graph.root)
