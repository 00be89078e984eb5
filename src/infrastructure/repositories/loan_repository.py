"""PostgreSQL implementation of LoanRepository."""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Loan
from src.domain.interfaces import LoanRepository
from src.infrastructure.database.models import LoanModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to timestamps read back from drivers that drop the offset."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class PostgresLoanRepository(LoanRepository):
    """
    PostgreSQL implementation of the Loan repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, loan: Loan) -> Loan:
        """Persist a new loan record to the database."""
        model = LoanModel(
            id=str(loan.id),
            loan_id=str(loan.loan_id),
            principal_cents=loan.principal_cents,
            term_days=loan.term_days,
            requested_date=loan.requested_date,
            due_date=loan.due_date,
            sequence=loan.sequence,
            superseded_at=loan.superseded_at,
        )

        self._session.add(model)
        await self._session.flush()

        return loan

    async def get_most_recent_by_loan_id(self, loan_id: UUID) -> Optional[Loan]:
        """Retrieve the record with the latest requested_date for a loan."""
        stmt = (
            select(LoanModel)
            .where(LoanModel.loan_id == str(loan_id))
            .order_by(LoanModel.requested_date.desc(), LoanModel.sequence.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_loan_id(self, loan_id: UUID) -> List[Loan]:
        """Retrieve every record of a loan, ordered by requested_date descending."""
        stmt = (
            select(LoanModel)
            .where(LoanModel.loan_id == str(loan_id))
            .order_by(LoanModel.requested_date.desc(), LoanModel.sequence.desc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: LoanModel) -> Loan:
        """Convert database model to domain entity."""
        return Loan(
            id=UUID(model.id),
            loan_id=UUID(model.loan_id),
            principal_cents=model.principal_cents,
            term_days=model.term_days,
            requested_date=as_utc(model.requested_date),
            due_date=as_utc(model.due_date),
            sequence=model.sequence,
            superseded_at=as_utc(model.superseded_at),
        )
