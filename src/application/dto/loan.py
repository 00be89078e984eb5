"""Data transfer objects for loan issuance and extension."""

from dataclasses import dataclass
from typing import List, Optional, Union
from uuid import UUID

from src.domain.entities import Loan


@dataclass(frozen=True)
class LoanApplicationRequest:
    """Input data for applying for a new loan."""

    term_days: Optional[int]
    # Ignored: the principal always comes from configuration.
    amount_cents: Optional[int] = None

    def to_entity(self, **fields) -> Loan:
        """Build a loan record from the request and the given fields."""
        return Loan(term_days=self.term_days, **fields)


@dataclass(frozen=True)
class LoanExtensionRequest:
    """Input data for extending an existing loan."""

    loan_id: Optional[Union[UUID, str]]
    # Ignored: extensions always use the configured term.
    term_days: Optional[int] = None


@dataclass(frozen=True)
class LoanApplicationResult:
    """Response data for an issued loan."""

    loan_id: str
    principal_cents: int
    term_days: int
    requested_date: str
    due_date: str

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoanApplicationResult":
        return cls(
            loan_id=str(loan.loan_id),
            principal_cents=loan.principal_cents,
            term_days=loan.term_days,
            requested_date=loan.requested_date.isoformat(),
            due_date=loan.due_date.isoformat(),
        )


@dataclass(frozen=True)
class LoanExtensionResult:
    """Response data for an extended loan."""

    loan_id: str
    principal_cents: int
    term_days: int
    requested_date: str
    due_date: str
    previous_due_date: str
    extension_number: int

    @classmethod
    def from_entity(cls, loan: Loan, previous: Loan) -> "LoanExtensionResult":
        return cls(
            loan_id=str(loan.loan_id),
            principal_cents=loan.principal_cents,
            term_days=loan.term_days,
            requested_date=loan.requested_date.isoformat(),
            due_date=loan.due_date.isoformat(),
            previous_due_date=previous.due_date.isoformat(),
            extension_number=loan.sequence,
        )


@dataclass(frozen=True)
class LoanRecordSummary:
    """One record in a loan's history."""

    record_id: str
    term_days: int
    requested_date: str
    due_date: str
    superseded: bool


@dataclass(frozen=True)
class LoanHistoryResponse:
    """Response containing every record of a logical loan."""

    loan_id: str
    principal_cents: int
    current_due_date: str
    records: List[LoanRecordSummary]

    @classmethod
    def from_entities(cls, loan_id: UUID, loans: List[Loan]) -> "LoanHistoryResponse":
        current = loans[0]
        records = [
            LoanRecordSummary(
                record_id=str(loan.id),
                term_days=loan.term_days,
                requested_date=loan.requested_date.isoformat(),
                due_date=loan.due_date.isoformat(),
                superseded=loan.is_superseded,
            )
            for loan in loans
        ]
        return cls(
            loan_id=str(loan_id),
            principal_cents=current.principal_cents,
            current_due_date=current.due_date.isoformat(),
            records=records,
        )
