"""
Search drivers for SC graphs.

This package provides the drivers that run a machine from a start
configuration: a lazy producer, a push-style builder with its stock
consumers, and a Burr application running the same loop.
"""

from .builder import CoGraphBuilder
from .burr_orchestrator import create_burr_app, run_burr_search
from .consumers import (
    CollectingConsumer, CountingConsumer, MinimalGraphConsumer,
    count_results, fold_graphs, minimal_graph,
)
from .producer import CoGraphProducer

__all__ = [
    "CoGraphBuilder",
    "CoGraphProducer",
    "CollectingConsumer",
    "CountingConsumer",
    "MinimalGraphConsumer",
    "count_results",
    "create_burr_app",
    "fold_graphs",
    "minimal_graph",
    "run_burr_search",
]
