"""
Machine building blocks: the generic control skeleton, policy mixins and
wrappers around client machines.
"""

from .base_machines import (
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

__all__ = [
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
]
