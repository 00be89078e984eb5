"""Repository implementations."""

from .loan_repository import PostgresLoanRepository
from .update_strategy import SupersedeLoanStrategy

__all__ = [
    "PostgresLoanRepository",
    "SupersedeLoanStrategy",
]
