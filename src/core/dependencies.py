"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import (
    PostgresLoanRepository,
    SupersedeLoanStrategy,
)
from src.application.services import LoanService
from src.service.lending import LoanSettings, get_loan_settings


# Repository dependencies
async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresLoanRepository:
    """Get a LoanRepository instance."""
    return PostgresLoanRepository(session)


async def get_update_strategy(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SupersedeLoanStrategy:
    """Get the update strategy applied to superseded loan records."""
    return SupersedeLoanStrategy(session)


# Service dependencies
async def get_loan_service(
    loan_repo: Annotated[PostgresLoanRepository, Depends(get_loan_repository)],
    update_strategy: Annotated[SupersedeLoanStrategy, Depends(get_update_strategy)],
    loan_settings: Annotated[LoanSettings, Depends(get_loan_settings)],
) -> LoanService:
    """Get a LoanService instance with all dependencies."""
    return LoanService(
        loan_repository=loan_repo,
        update_strategy=update_strategy,
        settings=loan_settings,
    )
