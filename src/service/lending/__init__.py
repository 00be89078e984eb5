"""
Lending rules for the Loan Gateway.
"""

from .settings import LoanSettings, get_loan_settings
from .terms import calculate_due_date, calculate_extended_due_date

__all__ = [
    "LoanSettings",
    "get_loan_settings",
    "calculate_due_date",
    "calculate_extended_due_date",
]
