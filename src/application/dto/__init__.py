"""Data Transfer Objects for application layer."""

from .loan import (
    LoanApplicationRequest,
    LoanApplicationResult,
    LoanExtensionRequest,
    LoanExtensionResult,
    LoanHistoryResponse,
    LoanRecordSummary,
)

__all__ = [
    "LoanApplicationRequest",
    "LoanApplicationResult",
    "LoanExtensionRequest",
    "LoanExtensionResult",
    "LoanHistoryResponse",
    "LoanRecordSummary",
]
