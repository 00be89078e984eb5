"""Loan entity representing one record in a loan's history."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Loan:
    """
    A single, immutable record of a logical loan.

    All records of one logical loan share ``loan_id``. Issuance creates
    the record with ``sequence`` 0 and every extension appends a new
    record with the next sequence number. The record with the latest
    ``requested_date`` is the current state of the loan.
    """

    loan_id: UUID
    principal_cents: int
    term_days: int
    requested_date: datetime
    due_date: datetime
    sequence: int = 0
    id: UUID = field(default_factory=uuid4)
    superseded_at: Optional[datetime] = None

    @property
    def is_superseded(self) -> bool:
        return self.superseded_at is not None

    def copy(self, **changes) -> "Loan":
        """
        Return a new record based on this one.

        The copy always gets a fresh record id and starts out current;
        any field given in ``changes`` overrides the copied value.
        """
        changes.setdefault("id", uuid4())
        changes.setdefault("superseded_at", None)
        return replace(self, **changes)

