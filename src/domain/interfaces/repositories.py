"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from src.domain.entities import Loan

T = TypeVar("T")


class LoanRepository(ABC):
    """
    Abstract repository for Loan record persistence.

    Records are append-only: implementations never delete or rewrite a
    saved record apart from the superseded marker.
    """

    @abstractmethod
    async def save(self, loan: Loan) -> Loan:
        """
        Persist a new loan record.

        Args:
            loan: The record to save

        Returns:
            The saved record
        """
        ...

    @abstractmethod
    async def get_most_recent_by_loan_id(self, loan_id: UUID) -> Optional[Loan]:
        """
        Retrieve the current record of a logical loan.

        Args:
            loan_id: The logical loan identifier

        Returns:
            The record with the latest requested_date, None if the loan
            has no records
        """
        ...

    @abstractmethod
    async def get_by_loan_id(self, loan_id: UUID) -> List[Loan]:
        """
        Retrieve every record of a logical loan.

        Args:
            loan_id: The logical loan identifier

        Returns:
            List of records, ordered by requested_date descending
        """
        ...


class ResourceUpdateStrategy(ABC, Generic[T]):
    """
    Strategy applied to a resource that is about to be replaced by a
    newer version of itself.
    """

    @abstractmethod
    async def update_resource(self, resource: T) -> None:
        """
        Mark a resource as updated.

        Args:
            resource: The resource being replaced

        Raises:
            LoanExtensionConflictException: If the resource was already
                replaced by someone else
        """
        ...
