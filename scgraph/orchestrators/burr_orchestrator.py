"""
Burr state-machine orchestration of the push-style search.

The same worklist loop as ``CoGraphBuilder``, expressed as a Burr
application so a search can be stepped, inspected and traced action by
action:

    advance -> (report) -> advance -> ... -> finish

``advance`` takes one partial graph off the pending list and either
expands it with the machine or surfaces it as a result; ``report`` hands
the result to the consumer; ``finish`` stores ``consumer.build_result()``
in state under ``result``.
"""

from __future__ import annotations

import logging
from typing import Any

from burr.core import Application, ApplicationBuilder, State, action, default, when

from ..config import SearchConfig, get_search_config
from ..graphs import PartialCoGraph
from ..interfaces import GraphConsumer, Machine
from ..transforms import transpose
from ..types import TraversalOrder

logger = logging.getLogger(__name__)

PRODUCED = "produced"
DISCARDED = "discarded"


@action(
    reads=["pending", "steps_taken"],
    writes=["pending", "emitted", "outcome", "has_result", "exhausted", "steps_taken"],
)
def advance(state: State, machine: Machine, traversal: TraversalOrder) -> State:
    pending = list(state["pending"])
    head = pending.pop(0)
    steps_taken = state["steps_taken"]
    emitted = None

    if head.is_unworkable:
        outcome = DISCARDED
    elif head.is_complete:
        outcome = PRODUCED
        emitted = transpose(head)
    else:
        outcome = None
        successors = list(machine.steps(head))
        steps_taken += 1
        if not successors:
            logger.warning(
                "Machine returned no successors for node at %s; branch dropped",
                list(head.current.path),
            )
        if traversal is TraversalOrder.BREADTH_FIRST:
            pending = pending + successors
        else:
            pending = successors + pending

    return state.update(
        pending=pending,
        emitted=emitted,
        outcome=outcome,
        has_result=outcome is not None,
        exhausted=not pending,
        steps_taken=steps_taken,
    )


@action(
    reads=["emitted", "outcome", "completed", "pruned"],
    writes=["completed", "pruned", "emitted", "has_result"],
)
def report(state: State, consumer: GraphConsumer) -> State:
    completed, pruned = state["completed"], state["pruned"]
    if state["outcome"] == DISCARDED:
        consumer.consume(None)
        pruned += 1
    else:
        consumer.consume(state["emitted"])
        completed += 1
    return state.update(completed=completed, pruned=pruned, emitted=None, has_result=False)


@action(reads=["completed", "pruned"], writes=["result"])
def finish(state: State, consumer: GraphConsumer) -> State:
    return state.update(result=consumer.build_result())


def create_burr_app(
    machine: Machine,
    consumer: GraphConsumer,
    conf: Any,
    extra: Any = None,
    config: SearchConfig | None = None,
) -> Application:
    """Build a Burr application searching from ``conf`` with ``machine``."""
    config = config or get_search_config()
    start = PartialCoGraph.start(conf, extra, order=config.traversal)
    return (
        ApplicationBuilder()
        .with_actions(
            advance=advance.bind(machine=machine, traversal=config.traversal),
            report=report.bind(consumer=consumer),
            finish=finish.bind(consumer=consumer),
        )
        .with_transitions(
            ("advance", "report", when(has_result=True)),
            ("advance", "finish", when(exhausted=True)),
            ("advance", "advance", default),
            ("report", "finish", when(exhausted=True)),
            ("report", "advance", default),
        )
        .with_state(
            pending=[start],
            emitted=None,
            outcome=None,
            has_result=False,
            exhausted=False,
            steps_taken=0,
            completed=0,
            pruned=0,
            result=None,
        )
        .with_entrypoint("advance")
        .build()
    )


def run_burr_search(
    machine: Machine,
    consumer: GraphConsumer,
    conf: Any,
    extra: Any = None,
    config: SearchConfig | None = None,
) -> Any:
    """Run a Burr-orchestrated search to exhaustion and return the consumer's result."""
    app = create_burr_app(machine, consumer, conf, extra, config)
    _, _, final_state = app.run(halt_after=["finish"])
    return final_state["result"]
