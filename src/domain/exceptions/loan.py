"""Loan-related domain exceptions."""

from dataclasses import dataclass
from typing import List

from .base import DomainException


@dataclass(frozen=True)
class Violation:
    """A single failed constraint on a request field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class InvalidLoanRequestException(DomainException):
    """Raised when a loan request violates one or more constraints."""

    def __init__(self, violations: List[Violation]):
        super().__init__(
            message="; ".join(str(v) for v in violations),
            code="INVALID_INPUT",
        )
        self.violations = list(violations)

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "violations": [
                {"field": v.field, "message": v.message} for v in self.violations
            ],
        }


class LoanNotFoundException(DomainException):
    """Raised when no record exists for a loan id."""

    def __init__(self, loan_id: str):
        super().__init__(
            message=f"Loan not found: {loan_id}",
            code="LOAN_NOT_FOUND",
        )
        self.loan_id = loan_id


class LoanExtensionConflictException(DomainException):
    """Raised when a loan record was already superseded by another extension."""

    def __init__(self, loan_id: str, record_id: str):
        super().__init__(
            message=f"Loan {loan_id} was extended concurrently; retry with the current state",
            code="LOAN_EXTENSION_CONFLICT",
        )
        self.loan_id = loan_id
        self.record_id = record_id
