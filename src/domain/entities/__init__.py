"""Domain Entities - Core business objects."""

from .loan import Loan

__all__ = [
    "Loan",
]
