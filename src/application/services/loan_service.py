"""Loan service - orchestrates the loan issuance and extension use cases."""

from datetime import datetime, timezone
from typing import Callable, Optional, Union
from uuid import UUID, uuid4

import structlog

from src.application.dto import (
    LoanApplicationRequest,
    LoanApplicationResult,
    LoanExtensionRequest,
    LoanExtensionResult,
    LoanHistoryResponse,
)
from src.application.validation import (
    validate_loan_application,
    validate_loan_extension,
)
from src.domain.entities import Loan
from src.domain.exceptions import InvalidLoanRequestException, LoanNotFoundException
from src.domain.interfaces import LoanRepository, ResourceUpdateStrategy
from src.service.lending import (
    LoanSettings,
    calculate_due_date,
    calculate_extended_due_date,
)

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_loan_id(value: Union[UUID, str]) -> Optional[UUID]:
    """Return the loan id as a UUID, or None if it cannot be one."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value).strip())
    except ValueError:
        return None


class LoanService:
    """
    Application service for loan use cases.

    Principal and extension term come from static configuration; the
    borrower only chooses the initial term.
    """

    def __init__(
        self,
        loan_repository: LoanRepository,
        update_strategy: ResourceUpdateStrategy[Loan],
        settings: LoanSettings,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._loan_repo = loan_repository
        self._update_strategy = update_strategy
        self._settings = settings
        self._clock = clock or utc_now

    async def apply_for_loan(self, request: LoanApplicationRequest) -> LoanApplicationResult:
        """
        Issue a new loan.

        Args:
            request: The application with the requested term

        Returns:
            LoanApplicationResult describing the saved loan

        Raises:
            InvalidLoanRequestException: If the request violates any constraint
        """
        violations = validate_loan_application(request, self._settings)
        if violations:
            logger.info(
                "loan_request_invalid",
                operation="apply",
                violations=[str(v) for v in violations],
            )
            raise InvalidLoanRequestException(violations)

        now = self._clock()
        loan = request.to_entity(
            loan_id=uuid4(),
            principal_cents=self._settings.principal_cents,
            requested_date=now,
            due_date=calculate_due_date(now, request.term_days),
        )

        saved = await self._loan_repo.save(loan)

        logger.info(
            "loan_issued",
            loan_id=str(saved.loan_id),
            principal_cents=saved.principal_cents,
            term_days=saved.term_days,
            due_date=saved.due_date.isoformat(),
        )

        return LoanApplicationResult.from_entity(saved)

    async def extend_loan(self, request: LoanExtensionRequest) -> LoanExtensionResult:
        """
        Extend an existing loan by the configured extension term.

        The current record is marked superseded first; then a new record,
        copied from it, is appended with the pushed-back due date.

        Args:
            request: The extension request naming the loan

        Returns:
            LoanExtensionResult describing the new record

        Raises:
            InvalidLoanRequestException: If the request violates any constraint
            LoanNotFoundException: If the loan has no records
            LoanExtensionConflictException: If the loan was extended concurrently
        """
        violations = validate_loan_extension(request)
        if violations:
            logger.info(
                "loan_request_invalid",
                operation="extend",
                violations=[str(v) for v in violations],
            )
            raise InvalidLoanRequestException(violations)

        log = logger.bind(loan_id=str(request.loan_id))

        loan_id = parse_loan_id(request.loan_id)
        latest = None
        if loan_id is not None:
            latest = await self._loan_repo.get_most_recent_by_loan_id(loan_id)

        if latest is None:
            log.warning("loan_not_found")
            raise LoanNotFoundException(str(request.loan_id))

        extension_days = self._settings.extension_term_days
        extended = latest.copy(
            term_days=extension_days,
            requested_date=self._clock(),
            due_date=calculate_extended_due_date(latest.due_date, extension_days),
            sequence=latest.sequence + 1,
        )

        await self._update_strategy.update_resource(latest)
        saved = await self._loan_repo.save(extended)

        log.info(
            "loan_extended",
            extension_number=saved.sequence,
            previous_due_date=latest.due_date.isoformat(),
            due_date=saved.due_date.isoformat(),
        )

        return LoanExtensionResult.from_entity(saved, previous=latest)

    async def get_loan_history(self, loan_id: Union[UUID, str]) -> LoanHistoryResponse:
        """
        Get every record of a loan, newest first.

        Raises:
            LoanNotFoundException: If the loan has no records
        """
        parsed = parse_loan_id(loan_id)
        loans = await self._loan_repo.get_by_loan_id(parsed) if parsed else []

        if not loans:
            logger.warning("loan_not_found", loan_id=str(loan_id))
            raise LoanNotFoundException(str(loan_id))

        logger.info("loan_history_retrieved", loan_id=str(loan_id), count=len(loans))

        return LoanHistoryResponse.from_entities(parsed, loans)
