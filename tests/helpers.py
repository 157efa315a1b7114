from __future__ import annotations

import random

from debt_simplifier.services.graph import Graph
from debt_simplifier.services.records import ExpenseRecord


def make_graph(*debts: tuple[str, str, float]) -> Graph:
    graph = Graph()
    for debtor, creditor, amount in debts:
        graph.add_debt(debtor, creditor, amount)
    return graph


def random_records(seed: int, *, names: int = 5, count: int = 8) -> list[ExpenseRecord]:
    rng = random.Random(seed)
    pool = [f"p{i}" for i in range(names)]
    records = []
    for _ in range(count):
        payer = rng.choice(pool)
        participants = rng.sample(pool, rng.randint(1, names))
        records.append(ExpenseRecord.of(payer, round(rng.uniform(1, 100), 2), participants))
    return records


def reachable(graph: Graph, start: str) -> set[str]:
    seen: set[str] = set()
    stack = [start]
    while stack:
        name = stack.pop()
        for creditor in graph[name].edges:
            if creditor not in seen:
                seen.add(creditor)
                stack.append(creditor)
    return seen
