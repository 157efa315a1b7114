from __future__ import annotations

import math

import pytest

from debt_simplifier.services.records import ExpenseRecord, InvalidRecordError, validate_record


def test_of_normalizes_amount_and_participants():
    rec = ExpenseRecord.of("A", 100, ["B", "C"])
    assert rec.amount == 100.0
    assert isinstance(rec.amount, float)
    assert rec.participants == ("B", "C")
    assert rec.share == 50.0


def test_valid_record_passes():
    validate_record(ExpenseRecord.of("A", 0, ["A"]))


@pytest.mark.parametrize(
    "record, reason",
    [
        (ExpenseRecord.of("A", 10, []), "participants"),
        (ExpenseRecord.of("A", -1, ["B"]), "negative"),
        (ExpenseRecord.of("A", math.nan, ["B"]), "finite"),
        (ExpenseRecord.of("A", math.inf, ["B"]), "finite"),
        (ExpenseRecord.of("", 10, ["B"]), "payer"),
        (ExpenseRecord.of("A", 10, ["B", ""]), "participant names"),
    ],
)
def test_invalid_records_are_rejected(record, reason):
    with pytest.raises(InvalidRecordError) as exc_info:
        validate_record(record, index=3)
    err = exc_info.value
    assert reason in err.reason
    assert err.record is record
    assert err.index == 3
    assert "record #3" in str(err)


def test_invalid_record_error_is_value_error():
    with pytest.raises(ValueError):
        validate_record(ExpenseRecord.of("A", 10, []))
