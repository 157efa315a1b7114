from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExpenseRecord:
    """
    payer paid `amount` in total; every name in `participants` owes an equal
    share of it to the payer. The payer may list themselves.
    """

    payer: str
    amount: float
    participants: tuple[str, ...]

    @classmethod
    def of(cls, payer: str, amount: float, participants: Iterable[str]) -> ExpenseRecord:
        return cls(payer=payer, amount=float(amount), participants=tuple(participants))

    @property
    def share(self) -> float:
        return self.amount / len(self.participants)


class InvalidRecordError(ValueError):
    def __init__(self, reason: str, *, record: ExpenseRecord, index: Optional[int] = None) -> None:
        self.reason = reason
        self.record = record
        self.index = index
        where = f"record #{index}" if index is not None else "record"
        super().__init__(f"Invalid {where} {record!r}: {reason}")


def validate_record(record: ExpenseRecord, *, index: Optional[int] = None) -> None:
    if not record.payer:
        raise InvalidRecordError("payer name must not be empty", record=record, index=index)
    if not record.participants:
        raise InvalidRecordError("participants list must not be empty", record=record, index=index)
    if any(not p for p in record.participants):
        raise InvalidRecordError("participant names must not be empty", record=record, index=index)
    amount = record.amount
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidRecordError("amount must be a number", record=record, index=index)
    if not math.isfinite(amount):
        raise InvalidRecordError("amount must be finite", record=record, index=index)
    if amount < 0:
        raise InvalidRecordError("amount must not be negative", record=record, index=index)
