from __future__ import annotations

import pytest

from debt_simplifier.services.records import ExpenseRecord


@pytest.fixture
def chain_records() -> list[ExpenseRecord]:
    # B owes A 50, C owes B 30
    return [
        ExpenseRecord.of("A", 50, ["B"]),
        ExpenseRecord.of("B", 30, ["C"]),
    ]
