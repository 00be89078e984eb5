"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database with the loan schema
- Test client for the FastAPI app with the database and lending
  settings overridden
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.infrastructure.database import Base, get_db_session
from src.infrastructure.repositories import (
    PostgresLoanRepository,
    SupersedeLoanStrategy,
)
from src.service.lending import LoanSettings, get_loan_settings


PRINCIPAL_CENTS = 50_000
EXTENSION_TERM_DAYS = 15


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def loan_repository(test_session: AsyncSession) -> PostgresLoanRepository:
    return PostgresLoanRepository(test_session)


@pytest.fixture
def update_strategy(test_session: AsyncSession) -> SupersedeLoanStrategy:
    return SupersedeLoanStrategy(test_session)


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def loan_settings() -> LoanSettings:
    """Lending settings with known principal and extension term."""
    return LoanSettings(
        principal_cents=PRINCIPAL_CENTS,
        extension_term_days=EXTENSION_TERM_DAYS,
        min_term_days=1,
        max_term_days=365,
    )


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    test_session: AsyncSession,
    loan_settings: LoanSettings,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with overridden dependencies.

    This client:
    - Uses an in-memory SQLite database shared by every request
    - Uses fixed lending settings
    """
    async def override_get_db_session():
        yield test_session

    def override_get_loan_settings():
        return loan_settings

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_loan_settings] = override_get_loan_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def loan_application_request() -> dict:
    """Request body for a 30 day loan."""
    return {"term_days": 30}
