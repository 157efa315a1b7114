from __future__ import annotations

import logging
from collections.abc import Iterable

from debt_simplifier.services.graph import Graph
from debt_simplifier.services.records import ExpenseRecord, validate_record

logger = logging.getLogger(__name__)


def build_graph(records: Iterable[ExpenseRecord]) -> Graph:
    records = list(records)
    # Validate the whole batch first so a bad record never leaves a half-built graph.
    for i, rec in enumerate(records):
        validate_record(rec, index=i)

    graph = Graph()
    for rec in records:
        graph.ensure_node(rec.payer)
        share = rec.share
        for participant in rec.participants:
            graph.add_debt(participant, rec.payer, share)

    logger.debug(
        "Built debt graph from %s records: %s nodes, %s edges",
        len(records),
        len(graph),
        graph.edge_count(),
    )
    return graph
