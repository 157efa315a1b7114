from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Edge:
    debtor: str
    creditor: str
    weight: float = 0.0


@dataclass
class Node:
    name: str
    edges: dict[str, Edge] = field(default_factory=dict)  # creditor name -> edge


def is_sink(node: Node) -> bool:
    # Self-edges never count as debt.
    return all(creditor == node.name for creditor in node.edges)


class Graph:
    """
    Directed debt graph: an edge debtor -> creditor means "debtor owes creditor
    `weight`". Nodes are kept in insertion order.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}

    def __getitem__(self, name: str) -> Node:
        return self._nodes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph({self.as_dict()!r})"

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def ensure_node(self, name: str) -> Node:
        node = self._nodes.get(name)
        if node is None:
            node = Node(name=name)
            self._nodes[name] = node
        return node

    def ensure_edge(self, debtor: str, creditor: str) -> Edge:
        self.ensure_node(creditor)
        node = self.ensure_node(debtor)
        edge = node.edges.get(creditor)
        if edge is None:
            edge = Edge(debtor=debtor, creditor=creditor)
            node.edges[creditor] = edge
        return edge

    def get_edge(self, debtor: str, creditor: str) -> Edge | None:
        node = self._nodes.get(debtor)
        if node is None:
            return None
        return node.edges.get(creditor)

    def add_debt(self, debtor: str, creditor: str, amount: float) -> None:
        if amount < 0:
            raise ValueError(f"Debt amount must not be negative: {debtor} -> {creditor} {amount}")
        if amount == 0:
            self.ensure_node(creditor)
            self.ensure_node(debtor)
            return
        self.ensure_edge(debtor, creditor).weight += amount

    def remove_edge(self, debtor: str, creditor: str) -> None:
        self._nodes[debtor].edges.pop(creditor, None)

    def drop_self_loops(self) -> int:
        dropped = 0
        for node in self._nodes.values():
            if node.edges.pop(node.name, None) is not None:
                dropped += 1
        return dropped

    def edges(self) -> Iterator[Edge]:
        for node in self._nodes.values():
            yield from node.edges.values()

    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self._nodes.values())

    def net_balances(self) -> dict[str, float]:
        # positive is owed, negative owes
        balances: dict[str, float] = {name: 0.0 for name in self._nodes}
        for edge in self.edges():
            balances[edge.debtor] -= edge.weight
            balances[edge.creditor] += edge.weight
        return balances

    def as_dict(self) -> dict[str, dict[str, float]]:
        return {
            node.name: {creditor: edge.weight for creditor, edge in node.edges.items()}
            for node in self._nodes.values()
        }
