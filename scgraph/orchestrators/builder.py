"""
Push-style SC graph builder.

The builder drives a search to exhaustion and hands every result to a
consumer: a transposed graph for each completed branch, None for each
pruned one. Use it when all results are folded into one aggregate
(counting, picking the smallest graph) rather than pulled one by one.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import SearchConfig, get_search_config
from ..interfaces import GraphConsumer, Machine
from ..transforms import transpose
from .producer import CoGraphProducer

logger = logging.getLogger(__name__)


class CoGraphBuilder:
    """Builds every SC graph a machine allows and reports them to a consumer."""

    def __init__(
        self,
        machine: Machine,
        consumer: GraphConsumer,
        config: SearchConfig | None = None,
    ):
        self.machine = machine
        self.consumer = consumer
        self.config = config or get_search_config()

    def build(self, conf: Any, extra: Any = None) -> Any:
        """
        Run the search from ``conf`` and return ``consumer.build_result()``.

        Args:
            conf: Start configuration
            extra: Extra info of the root node

        Returns:
            Whatever the consumer aggregates
        """
        producer = CoGraphProducer(conf, self.machine, extra, self.config)
        for graph in producer:
            if graph.is_unworkable:
                self.consumer.consume(None)
            else:
                self.consumer.consume(transpose(graph))
        logger.debug(
            "Builder finished from %r: %d produced, %d discarded",
            conf, producer.completed, producer.pruned,
        )
        return self.consumer.build_result()
