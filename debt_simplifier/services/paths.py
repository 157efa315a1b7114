from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from debt_simplifier.services.graph import Edge, Graph, Node

Path = tuple["Step", ...]


class CycleDetection(str, enum.Enum):
    EXACT = "exact"
    MIDPOINT = "midpoint"


@dataclass(frozen=True)
class Step:
    source: str  # debtor
    target: str  # creditor
    edge: Edge


def _steps(node: Node) -> list[Step]:
    return [Step(source=node.name, target=creditor, edge=edge) for creditor, edge in node.edges.items() if creditor != node.name]


def iter_paths(graph: Graph, start: str, detection: CycleDetection | str = CycleDetection.EXACT) -> Iterator[Path]:
    """
    Depth-first walks from `start`. Yields one path per walk that reaches a
    sink, plus walks cut short at a detected cycle (the closing step is
    included, so the last target already appears earlier in the path).

    Paths are snapshots of the graph at the time each node was expanded; do not
    keep iterating after mutating the graph.
    """
    detection = CycleDetection(detection)
    if detection is CycleDetection.EXACT:
        yield from _walk_exact(graph, start, (), frozenset((start,)))
    else:
        yield from _walk_midpoint(graph, start, ())


def _walk_exact(graph: Graph, name: str, path: Path, on_path: frozenset[str]) -> Iterator[Path]:
    steps = _steps(graph[name])
    if not steps:
        yield path
        return
    for step in steps:
        if step.target in on_path:
            yield path + (step,)
        else:
            yield from _walk_exact(graph, step.target, path + (step,), on_path | {step.target})


def _walk_midpoint(graph: Graph, name: str, path: Path) -> Iterator[Path]:
    # Only catches loops whose node lines up with the path's midpoint; others recurse
    # until RecursionError.
    if len(path) > 2 and path[len(path) // 2].source == name:
        yield path
        return
    steps = _steps(graph[name])
    if not steps:
        yield path
        return
    for step in steps:
        yield from _walk_midpoint(graph, step.target, path + (step,))


def first_loop(path: Path) -> Path | None:
    """Return the first simple cycle closed by `path`, or None if the path never revisits a node."""
    if not path:
        return None
    seen = {path[0].source: 0}
    for i, step in enumerate(path):
        j = seen.get(step.target)
        if j is not None:
            return path[j : i + 1]
        seen[step.target] = i + 1
    return None
