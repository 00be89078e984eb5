"""
Due date arithmetic for loans and loan extensions.

Terms are whole days; timestamps keep their time of day and timezone.
"""

from datetime import datetime, timedelta


def calculate_due_date(requested_date: datetime, term_days: int) -> datetime:
    """
    Due date of a newly issued loan.

    Args:
        requested_date: When the loan was requested
        term_days: Requested term in days

    Returns:
        requested_date shifted by term_days
    """
    return requested_date + timedelta(days=term_days)


def calculate_extended_due_date(due_date: datetime, extension_days: int) -> datetime:
    """
    Due date after an extension.

    Extensions are counted from the previous due date, not from the
    moment the extension was requested.
    """
    return due_date + timedelta(days=extension_days)
