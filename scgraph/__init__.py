"""
Multi-result SC graph search engine.

This package provides the generic machinery for building SC graphs
(trees with loopbacks) by a backtracking search over partial graphs:

- Graph representations: child-pointer ``Graph`` and parent-pointer ``CoGraph``
- ``PartialCoGraph`` and the step vocabulary applied to it
- Machines (``Machine`` protocol, ``GenericMultiMachine`` skeleton)
- Drivers: lazy ``CoGraphProducer`` and push-style ``CoGraphBuilder``
- Transposition of completed graphs

Version: 1.0.0
"""

SCGRAPH_API_VERSION = "1.0.0"

from .types import (
    CoPath,
    Path,
    Step,
    StepKind,
    SubStep,
    TraversalOrder,
    compare_paths,
    is_prefix,
    path_key,
)

from .errors import (
    ConfigError,
    GraphStateError,
    PathNotFoundError,
    SCGraphError,
    SearchExhaustedError,
)

from .config import (
    SearchConfig,
    configure_logging,
    get_search_config,
    set_search_config,
)

from .graphs import (
    CoEdge,
    CoGraph,
    CoNode,
    Edge,
    Graph,
    Node,
    PartialCoGraph,
)

from .interfaces import GraphConsumer, Machine, StepMachine

from .transforms import check_subtree, graph_size, is_safe, to_cograph, transpose

from .machines import (
    AncestorFolding,
    AnyNodeFolding,
    BoundedMachine,
    CurrentGensOnWhistle,
    GenericMultiMachine,
    GensWithUnaryWhistle,
    RuleDriving,
    SafetyAware,
    StepMachineAdapter,
    UnaryWhistle,
)

from .orchestrators import (
    CoGraphBuilder,
    CoGraphProducer,
    CollectingConsumer,
    CountingConsumer,
    MinimalGraphConsumer,
    count_results,
    create_burr_app,
    fold_graphs,
    minimal_graph,
    run_burr_search,
)

__all__ = [
    "SCGRAPH_API_VERSION",
    # Types
    "CoPath",
    "Path",
    "Step",
    "StepKind",
    "SubStep",
    "TraversalOrder",
    "compare_paths",
    "is_prefix",
    "path_key",
    # Errors
    "ConfigError",
    "GraphStateError",
    "PathNotFoundError",
    "SCGraphError",
    "SearchExhaustedError",
    # Configuration
    "SearchConfig",
    "configure_logging",
    "get_search_config",
    "set_search_config",
    # Graphs
    "CoEdge",
    "CoGraph",
    "CoNode",
    "Edge",
    "Graph",
    "Node",
    "PartialCoGraph",
    # Interfaces
    "GraphConsumer",
    "Machine",
    "StepMachine",
    # Transformations
    "check_subtree",
    "graph_size",
    "is_safe",
    "to_cograph",
    "transpose",
    # Machines
    "AncestorFolding",
    "AnyNodeFolding",
    "BoundedMachine",
    "CurrentGensOnWhistle",
    "GenericMultiMachine",
    "GensWithUnaryWhistle",
    "RuleDriving",
    "SafetyAware",
    "StepMachineAdapter",
    "UnaryWhistle",
    # Drivers
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
