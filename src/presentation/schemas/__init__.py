"""Pydantic schemas for API request/response validation."""

from .loan import (
    LoanApplicationRequestSchema,
    LoanApplicationResponseSchema,
    LoanExtensionRequestSchema,
    LoanExtensionResponseSchema,
    LoanHistoryResponseSchema,
    LoanRecordSchema,
)
from .error import ErrorResponseSchema, ViolationSchema

__all__ = [
    "LoanApplicationRequestSchema",
    "LoanApplicationResponseSchema",
    "LoanExtensionRequestSchema",
    "LoanExtensionResponseSchema",
    "LoanHistoryResponseSchema",
    "LoanRecordSchema",
    "ErrorResponseSchema",
    "ViolationSchema",
]
