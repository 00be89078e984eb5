"""Loan-related Pydantic schemas."""

from typing import Any
from pydantic import BaseModel, Field, ConfigDict


class LoanApplicationRequestSchema(BaseModel):
    """
    Schema for POST /v1/loans request body.

    Fields are accepted as sent; type and range checks live in the
    application layer.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "term_days": 30,
                }
            ]
        }
    )
    term_days: Any = Field(
        None,
        description="Requested loan term in days",
        examples=[30],
        json_schema_extra={"type": "integer"},
    )
    amount_cents: Any = Field(
        None,
        description="Ignored; every loan is issued with the configured principal",
        examples=[50000],
        json_schema_extra={"type": "integer"},
    )


class LoanExtensionRequestSchema(BaseModel):
    """Schema for POST /v1/loans/{loan_id}/extensions request body."""

    term_days: Any = Field(
        None,
        description="Ignored; extensions always use the configured term",
        json_schema_extra={"type": "integer"},
    )


class LoanApplicationResponseSchema(BaseModel):
    """Schema for POST /v1/loans response body."""

    loan_id: str = Field(
        ...,
        description="UUID of the logical loan",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )
    principal_cents: int = Field(
        ...,
        gt=0,
        description="Principal issued in cents",
        examples=[50000],
    )
    term_days: int = Field(
        ...,
        gt=0,
        description="Loan term in days",
        examples=[30],
    )
    requested_date: str = Field(
        ...,
        description="ISO 8601 timestamp of the application",
    )
    due_date: str = Field(
        ...,
        description="ISO 8601 timestamp the loan is due",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "loan_id": "550e8400-e29b-41d4-a716-446655440000",
                    "principal_cents": 50000,
                    "term_days": 30,
                    "requested_date": "2025-09-17T12:00:00+00:00",
                    "due_date": "2025-10-17T12:00:00+00:00",
                }
            ]
        }
    )


class LoanExtensionResponseSchema(LoanApplicationResponseSchema):
    """Schema for POST /v1/loans/{loan_id}/extensions response body."""

    previous_due_date: str = Field(
        ...,
        description="Due date before this extension",
    )
    extension_number: int = Field(
        ...,
        ge=1,
        description="How many times the loan has been extended, this one included",
        examples=[1],
    )


class LoanRecordSchema(BaseModel):
    """Schema for one record in a loan's history."""

    record_id: str = Field(..., description="UUID of the record")
    term_days: int = Field(..., gt=0, description="Term of this record in days")
    requested_date: str = Field(..., description="ISO 8601 timestamp of the record")
    due_date: str = Field(..., description="Due date set by this record")
    superseded: bool = Field(
        ...,
        description="True once a later extension replaced this record",
    )


class LoanHistoryResponseSchema(BaseModel):
    """Schema for GET /v1/loans/{loan_id} response."""

    loan_id: str = Field(..., description="UUID of the logical loan")
    principal_cents: int = Field(..., gt=0, description="Principal in cents")
    current_due_date: str = Field(..., description="Due date of the current record")
    records: list[LoanRecordSchema] = Field(
        ...,
        description="Every record of the loan, newest first",
    )
