"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ViolationSchema(BaseModel):
    """A single failed constraint."""

    field: str = Field(..., description="Request field that failed", examples=["term_days"])
    message: str = Field(
        ...,
        description="What is wrong with the field",
        examples=["term_days must be between 1 and 365"],
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["LOAN_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Loan not found: 550e8400-e29b-41d4-a716-446655440000"],
    )
    violations: list[ViolationSchema] | None = Field(
        None,
        description="Every violated constraint (INVALID_INPUT only)",
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_INPUT",
                    "message": "term_days: term_days must be between 1 and 365",
                    "violations": [
                        {
                            "field": "term_days",
                            "message": "term_days must be between 1 and 365",
                        }
                    ],
                    "request_id": "abc123",
                }
            ]
        }
    }
