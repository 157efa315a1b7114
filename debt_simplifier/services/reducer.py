from __future__ import annotations

import logging
from typing import Optional

from debt_simplifier.config import settings
from debt_simplifier.services.graph import Graph
from debt_simplifier.services.paths import CycleDetection, Path, first_loop, iter_paths

logger = logging.getLogger(__name__)


class ReductionLimitError(RuntimeError):
    def __init__(self, max_sweeps: int, collapses: int) -> None:
        self.max_sweeps = max_sweeps
        self.collapses = collapses
        super().__init__(f"Debt reduction did not settle within {max_sweeps} sweeps ({collapses} collapses so far)")


def _prepare(graph: Graph) -> None:
    graph.drop_self_loops()
    for edge in list(graph.edges()):
        if edge.weight < 0:
            raise ValueError(f"Negative debt {edge.debtor} -> {edge.creditor}: {edge.weight}")
        if edge.weight == 0:
            graph.remove_edge(edge.debtor, edge.creditor)


def _min_weight(path: Path) -> float:
    weights = [step.edge.weight for step in path if step.edge.weight > 0]
    return min(weights) if weights else 0.0


def collapse(graph: Graph, path: Path) -> float:
    """
    Replace a walk by a direct edge from its first to its last node, moving the
    smallest debt on the walk onto that edge. A walk that closes a loop only
    cancels the loop. Returns the amount moved (0 when nothing changed).
    """
    loop = first_loop(path)
    if loop is not None:
        path = loop
    min_weight = _min_weight(path)
    if min_weight == 0:
        return 0.0

    for step in path:
        if step.edge.weight == min_weight:
            graph.remove_edge(step.source, step.target)
        else:
            step.edge.weight -= min_weight

    start, end = path[0].source, path[-1].target
    if start != end:
        graph.ensure_edge(start, end).weight += min_weight
    return min_weight


def _first_non_trivial(graph: Graph, start: str, detection: CycleDetection) -> Optional[Path]:
    for path in iter_paths(graph, start, detection):
        if len(path) > 1:
            return path
    return None


def reduce_graph(
    graph: Graph,
    *,
    detection: CycleDetection | str | None = None,
    max_sweeps: Optional[int] = None,
) -> int:
    """
    Collapse chains and cycles in place until every debtor owes only sinks
    directly. Net balances are preserved. Returns the number of collapses.
    """
    detection = CycleDetection(detection or settings.cycle_detection)
    if max_sweeps is not None and max_sweeps < 1:
        raise ValueError(f"max_sweeps must be at least 1, got {max_sweeps}")
    _prepare(graph)
    if max_sweeps is None:
        max_sweeps = settings.reduce_max_sweeps or graph.edge_count() + 2

    collapses = 0
    sweeps = 0
    progress = True
    while progress:
        if sweeps >= max_sweeps:
            raise ReductionLimitError(max_sweeps, collapses)
        sweeps += 1
        progress = False
        for start in list(graph):
            while True:
                path = _first_non_trivial(graph, start, detection)
                if path is None:
                    break
                moved = collapse(graph, path)
                if moved == 0:
                    break
                logger.debug("Collapsed %s-step path from %s, moved %s", len(path), start, moved)
                collapses += 1
                progress = True

    logger.debug("Reduced graph in %s sweeps with %s collapses; %s edges left", sweeps, collapses, graph.edge_count())
    return collapses
