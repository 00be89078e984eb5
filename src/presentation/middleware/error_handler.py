"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    InvalidLoanRequestException,
    LoanExtensionConflictException,
    LoanNotFoundException,
    Violation,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_body(exc: DomainException) -> dict:
    return {**exc.to_dict(), "request_id": get_request_id()}


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidLoanRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidLoanRequestException,
    ) -> JSONResponse:
        """Handle invalid loan requests, listing every violation."""
        return JSONResponse(
            status_code=400,
            content=error_body(exc),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle bodies and paths FastAPI could not parse."""
        violations = [
            Violation(
                field=".".join(str(part) for part in err["loc"] if part != "body"),
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=error_body(InvalidLoanRequestException(violations)),
        )

    @app.exception_handler(LoanNotFoundException)
    async def loan_not_found_handler(
        request: Request,
        exc: LoanNotFoundException,
    ) -> JSONResponse:
        """Handle loan not found errors."""
        return JSONResponse(
            status_code=404,
            content=error_body(exc),
        )

    @app.exception_handler(LoanExtensionConflictException)
    async def extension_conflict_handler(
        request: Request,
        exc: LoanExtensionConflictException,
    ) -> JSONResponse:
        """Handle concurrent extensions of the same loan."""
        return JSONResponse(
            status_code=409,
            content=error_body(exc),
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=400,
            content=error_body(exc),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
