"""
SC graph representations.

- ``Graph``/``Node``/``Edge``: child-pointer form, good for top-down consumers
- ``CoGraph``/``CoNode``/``CoEdge``: parent-pointer form, good for ancestor queries
- ``PartialCoGraph``: the immutable work-in-progress value driven by machines
"""

from .cograph import CoEdge, CoGraph, CoNode
from .partial import PartialCoGraph
from .tree import Edge, Graph, Node

__all__ = [
    "CoEdge",
    "CoGraph",
    "CoNode",
    "Edge",
    "Graph",
    "Node",
    "PartialCoGraph",
]
