from __future__ import annotations

import json
from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from debt_simplifier.services.records import ExpenseRecord


class RecordIn(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    payer: str = Field(..., validation_alias=AliasChoices("payer", "ingress"))
    amount: float
    participants: list[str] = Field(..., validation_alias=AliasChoices("participants", "egresses"))

    def to_record(self) -> ExpenseRecord:
        return ExpenseRecord.of(self.payer, self.amount, self.participants)


_records_adapter = TypeAdapter(list[RecordIn])


class RecordFileError(ValueError):
    pass


def parse_records(data: object) -> list[ExpenseRecord]:
    # Only the shape is checked here; amounts and participant counts are the builder's job.
    try:
        items = _records_adapter.validate_python(data)
    except ValidationError as e:
        raise RecordFileError(f"Malformed expense records: {e}") from e
    return [item.to_record() for item in items]


def load_records(path: str | Path) -> list[ExpenseRecord]:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RecordFileError(f"Cannot read {path}: {e}") from e
    return parse_records(data)
