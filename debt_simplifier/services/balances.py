from __future__ import annotations

import logging
import math
from collections import defaultdict
from collections.abc import Iterable

from debt_simplifier.services.graph import Graph
from debt_simplifier.services.records import ExpenseRecord

logger = logging.getLogger(__name__)


def record_balances(records: Iterable[ExpenseRecord]) -> dict[str, float]:
    # positive is owed, negative owes
    balances: dict[str, float] = defaultdict(float)
    for rec in records:
        balances[rec.payer] += rec.amount
        share = rec.share
        for participant in rec.participants:
            balances[participant] -= share
    return dict(balances)


def graph_represents_balances(
    graph: Graph,
    records: Iterable[ExpenseRecord],
    *,
    rel_tol: float = 1e-9,
    abs_tol: float = 1e-9,
) -> bool:
    """
    Check that `graph` moves the same net amount to or from every participant as
    the records it was built from. Names present on only one side count as 0 on
    the other.
    """
    expected = record_balances(records)
    actual = graph.net_balances()
    ok = True
    for name in expected.keys() | actual.keys():
        want = expected.get(name, 0.0)
        got = actual.get(name, 0.0)
        if not math.isclose(want, got, rel_tol=rel_tol, abs_tol=abs_tol):
            logger.warning("Balance mismatch for %s: expected %s, graph has %s", name, want, got)
            ok = False
    return ok
