"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .loan import (
    InvalidLoanRequestException,
    LoanExtensionConflictException,
    LoanNotFoundException,
    Violation,
)

__all__ = [
    "DomainException",
    "InvalidLoanRequestException",
    "LoanExtensionConflictException",
    "LoanNotFoundException",
    "Violation",
]
