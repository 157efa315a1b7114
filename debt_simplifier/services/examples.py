from __future__ import annotations

from debt_simplifier.services.balances import graph_represents_balances
from debt_simplifier.services.builder import build_graph
from debt_simplifier.services.records import ExpenseRecord
from debt_simplifier.services.reducer import reduce_graph

SAMPLE_SETS: list[list[ExpenseRecord]] = [
    [
        ExpenseRecord.of("Fred", 40, ["Fred", "Scooby", "Shaggy", "Dafny"]),
        ExpenseRecord.of("Thelma", 10, ["Scooby", "Shaggy"]),
        ExpenseRecord.of("Fred", 200, ["Dafny", "Thelma", "Scooby", "Shaggy"]),
        ExpenseRecord.of("Shaggy", 500, ["Scrappy"]),
    ],
    [
        ExpenseRecord.of("Fred", 40, ["Fred", "Scooby", "Shaggy", "Dafny"]),
        ExpenseRecord.of("Thelma", 10, ["Scooby", "Shaggy"]),
        ExpenseRecord.of("Fred", 200, ["Dafny", "Thelma", "Scooby", "Shaggy"]),
        ExpenseRecord.of("Shaggy", 500, ["Thelma", "Scrappy"]),
    ],
]


def example_chain_collapse() -> None:
    """
    B owes A 50, C owes B 30.

    The two-step walk C -> B -> A carries at most 30, so C pays A directly:
      C -> A 30, B -> A 20, C -> B gone.
    """

    records = [
        ExpenseRecord.of("A", 50, ["B"]),
        ExpenseRecord.of("B", 30, ["C"]),
    ]
    graph = build_graph(records)
    reduce_graph(graph, detection="exact")
    assert graph.as_dict() == {"A": {}, "B": {"A": 20.0}, "C": {"A": 30.0}}
    assert graph_represents_balances(graph, records)


def example_cycle_cancels() -> None:
    # X and Y paid 10 for each other: nothing is left to settle.
    records = [
        ExpenseRecord.of("Y", 10, ["X"]),
        ExpenseRecord.of("X", 10, ["Y"]),
    ]
    graph = build_graph(records)
    reduce_graph(graph, detection="exact")
    assert graph.edge_count() == 0
