from __future__ import annotations

from collections.abc import Iterator

from debt_simplifier.services.graph import Graph, is_sink


def format_amount(amount: float) -> str:
    # 20.0 -> "20", 12.5 -> "12.5", 1/3 -> "0.333333"
    return f"{amount:.6f}".rstrip("0").rstrip(".")


def render_lines(graph: Graph) -> Iterator[str]:
    for node in graph.nodes():
        if is_sink(node):
            continue
        yield f"{node.name} => "
        for creditor, edge in node.edges.items():
            if creditor == node.name:
                continue
            yield f"    {creditor} {format_amount(edge.weight)}"


def render_graph(graph: Graph) -> str:
    return "\n".join(render_lines(graph))
