"""
Fixtures for unit tests.

Provides in-memory implementations of the loan ports and a fixed clock,
so the service can be exercised without a database.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import UUID

import pytest

from src.application.services import LoanService
from src.domain.entities import Loan
from src.domain.exceptions import LoanExtensionConflictException
from src.domain.interfaces import LoanRepository, ResourceUpdateStrategy
from src.service.lending import LoanSettings


FIXED_NOW = datetime(2025, 9, 17, 12, 0, tzinfo=timezone.utc)


class InMemoryLoanRepository(LoanRepository):
    """Loan repository backed by a list; records every call in ``events``."""

    def __init__(self, events: list):
        self.records: List[Loan] = []
        self.events = events

    async def save(self, loan: Loan) -> Loan:
        self.events.append(("save", loan.id))
        self.records.append(loan)
        return loan

    async def get_most_recent_by_loan_id(self, loan_id: UUID) -> Optional[Loan]:
        history = await self.get_by_loan_id(loan_id)
        return history[0] if history else None

    async def get_by_loan_id(self, loan_id: UUID) -> List[Loan]:
        matching = [r for r in self.records if r.loan_id == loan_id]
        return sorted(
            matching,
            key=lambda r: (r.requested_date, r.sequence),
            reverse=True,
        )

    def replace(self, loan: Loan) -> None:
        self.records = [loan if r.id == loan.id else r for r in self.records]


class InMemorySupersedeStrategy(ResourceUpdateStrategy[Loan]):
    """Marks records superseded in an InMemoryLoanRepository."""

    def __init__(self, repository: InMemoryLoanRepository, events: list):
        self.repository = repository
        self.events = events

    async def update_resource(self, resource: Loan) -> None:
        self.events.append(("update", resource.id))
        stored = next(r for r in self.repository.records if r.id == resource.id)
        if stored.is_superseded:
            raise LoanExtensionConflictException(str(stored.loan_id), str(stored.id))
        self.repository.replace(stored.copy(id=stored.id, superseded_at=FIXED_NOW))


class SteppingClock:
    """Clock that advances one minute on every call."""

    def __init__(self, start: datetime = FIXED_NOW):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def loan_settings() -> LoanSettings:
    return LoanSettings(principal_cents=50_000, extension_term_days=15)


@pytest.fixture
def repository(events) -> InMemoryLoanRepository:
    return InMemoryLoanRepository(events)


@pytest.fixture
def update_strategy(repository, events) -> InMemorySupersedeStrategy:
    return InMemorySupersedeStrategy(repository, events)


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def loan_service(repository, update_strategy, loan_settings, clock) -> LoanService:
    return LoanService(
        loan_repository=repository,
        update_strategy=update_strategy,
        settings=loan_settings,
        clock=clock,
    )
