from __future__ import annotations

import pytest

from helpers import make_graph
from debt_simplifier.services.graph import Edge, Graph, Node, is_sink


def test_ensure_node_is_get_or_insert():
    graph = Graph()
    node = graph.ensure_node("A")
    assert graph.ensure_node("A") is node
    assert "A" in graph
    assert len(graph) == 1


def test_ensure_edge_creates_both_nodes_at_zero_weight():
    graph = Graph()
    edge = graph.ensure_edge("B", "A")
    assert edge.weight == 0
    assert graph.ensure_edge("B", "A") is edge
    assert list(graph) == ["A", "B"]


def test_add_debt_accumulates_into_one_edge():
    graph = make_graph(("B", "A", 10), ("B", "A", 5.5))
    assert graph.as_dict() == {"A": {}, "B": {"A": 15.5}}
    assert graph.edge_count() == 1


def test_add_zero_debt_creates_nodes_only():
    graph = make_graph(("B", "A", 0))
    assert graph.as_dict() == {"A": {}, "B": {}}


def test_add_negative_debt_raises():
    with pytest.raises(ValueError):
        Graph().add_debt("B", "A", -1)


def test_remove_edge_and_get_edge():
    graph = make_graph(("B", "A", 10))
    assert graph.get_edge("B", "A").weight == 10
    graph.remove_edge("B", "A")
    assert graph.get_edge("B", "A") is None
    assert graph.get_edge("missing", "A") is None
    assert graph.edge_count() == 0


def test_drop_self_loops():
    graph = make_graph(("A", "A", 20), ("B", "A", 20))
    assert graph.drop_self_loops() == 1
    assert graph.as_dict() == {"A": {}, "B": {"A": 20}}


def test_net_balances():
    graph = make_graph(("B", "A", 50), ("C", "B", 30))
    assert graph.net_balances() == {"A": 50, "B": -20, "C": -30}



@pytest.mark.parametrize(
    "creditors, expected",
    [
        ([], True),
        (["A"], True),
        (["B"], False),
        (["A", "B"], False),
    ],
)
def test_is_sink(creditors, expected):
    node = Node(name="A", edges={c: Edge(debtor="A", creditor=c, weight=1.0) for c in creditors})
    assert is_sink(node) is expected
