"""Loan API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, Path

from src.application.dto import LoanApplicationRequest, LoanExtensionRequest
from src.application.services import LoanService
from src.core.dependencies import get_loan_service
from src.core.metrics import (
    record_application_rejected,
    record_extension,
    record_loan_issued,
    track_operation_latency,
)
from src.domain.exceptions import (
    InvalidLoanRequestException,
    LoanExtensionConflictException,
    LoanNotFoundException,
)
from src.presentation.schemas import (
    ErrorResponseSchema,
    LoanApplicationRequestSchema,
    LoanApplicationResponseSchema,
    LoanExtensionRequestSchema,
    LoanExtensionResponseSchema,
    LoanHistoryResponseSchema,
    LoanRecordSchema,
)

loan_router = APIRouter(
    prefix="/loans",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)

LoanIdPath = Annotated[str, Path(description="UUID of the logical loan")]


@loan_router.post(
    "",
    response_model=LoanApplicationResponseSchema,
    status_code=201,
    summary="Apply for Loan",
    description="""Issue a new loan with the configured principal for the requested term""",
    responses={
        201: {"description": "Loan issued"},
    },
)
async def apply_for_loan(
    request: LoanApplicationRequestSchema,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanApplicationResponseSchema:
    """
    Apply for a new loan.

    Returns the loan id, principal, and due date.
    """
    dto = LoanApplicationRequest(
        term_days=request.term_days,
        amount_cents=request.amount_cents,
    )

    try:
        with track_operation_latency("apply"):
            response = await loan_service.apply_for_loan(dto)
    except InvalidLoanRequestException:
        record_application_rejected("invalid")
        raise

    record_loan_issued(response.principal_cents)

    return LoanApplicationResponseSchema(
        loan_id=response.loan_id,
        principal_cents=response.principal_cents,
        term_days=response.term_days,
        requested_date=response.requested_date,
        due_date=response.due_date,
    )


@loan_router.post(
    "/{loan_id}/extensions",
    response_model=LoanExtensionResponseSchema,
    status_code=201,
    summary="Extend Loan",
    description="""
    Extend a loan by the configured extension term.

    The new due date is the previous due date plus the extension term.
    """,
    responses={
        201: {"description": "Loan extended"},
        404: {"model": ErrorResponseSchema, "description": "Loan not found"},
        409: {"model": ErrorResponseSchema, "description": "Loan extended concurrently"},
    },
)
async def extend_loan(
    loan_id: LoanIdPath,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
    request: Annotated[Optional[LoanExtensionRequestSchema], Body()] = None,
) -> LoanExtensionResponseSchema:
    dto = LoanExtensionRequest(
        loan_id=loan_id,
        term_days=request.term_days if request else None,
    )

    try:
        with track_operation_latency("extend"):
            response = await loan_service.extend_loan(dto)
    except InvalidLoanRequestException:
        record_extension("invalid")
        raise
    except LoanNotFoundException:
        record_extension("not_found")
        raise
    except LoanExtensionConflictException:
        record_extension("conflict")
        raise

    record_extension("extended")

    return LoanExtensionResponseSchema(
        loan_id=response.loan_id,
        principal_cents=response.principal_cents,
        term_days=response.term_days,
        requested_date=response.requested_date,
        due_date=response.due_date,
        previous_due_date=response.previous_due_date,
        extension_number=response.extension_number,
    )


@loan_router.get(
    "/{loan_id}",
    response_model=LoanHistoryResponseSchema,
    summary="Get Loan History",
    description="""
    Retrieve every record of a loan.

    Records are ordered by request date (newest first); the first one
    is the current state of the loan.
    """,
    responses={
        200: {"description": "History retrieved successfully"},
        404: {"model": ErrorResponseSchema, "description": "Loan not found"},
    },
)
async def get_loan_history(
    loan_id: LoanIdPath,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanHistoryResponseSchema:
    response = await loan_service.get_loan_history(loan_id)

    return LoanHistoryResponseSchema(
        loan_id=response.loan_id,
        principal_cents=response.principal_cents,
        current_due_date=response.current_due_date,
        records=[
            LoanRecordSchema(
                record_id=r.record_id,
                term_days=r.term_days,
                requested_date=r.requested_date,
                due_date=r.due_date,
                superseded=r.superseded,
            )
            for r in response.records
        ],
    )
