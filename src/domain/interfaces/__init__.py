"""
Domain Interfaces (Ports)
"""

from .repositories import LoanRepository, ResourceUpdateStrategy

__all__ = [
    "LoanRepository",
    "ResourceUpdateStrategy",
]
