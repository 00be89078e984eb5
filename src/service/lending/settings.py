"""
Lending Settings for the Loan Gateway.

The loan principal and the extension term are fixed by configuration
rather than chosen by the borrower. Both are read once at startup and
stay immutable for the lifetime of the process.

Environment variables use the LOAN_ prefix:
    LOAN_PRINCIPAL_CENTS=50000
    LOAN_EXTENSION_TERM_DAYS=15
    LOAN_MAX_TERM_DAYS=365

Usage:
    from src.service.lending.settings import get_loan_settings

    principal = get_loan_settings().principal_cents

    # Or create custom settings for testing
    custom = LoanSettings(extension_term_days=7)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoanSettings(BaseSettings):
    """
    Static lending parameters.

    All monetary values are in cents. All terms are in days.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    principal_cents: int = Field(
        default=50_000,
        gt=0,
        description="Principal granted for every new loan ($500)",
    )
    extension_term_days: int = Field(
        default=15,
        gt=0,
        description="Days added to the due date by each extension",
    )

    # === Term Bounds ===
    min_term_days: int = Field(
        default=1,
        gt=0,
        description="Shortest term a borrower may request",
    )
    max_term_days: int = Field(
        default=365,
        gt=0,
        description="Longest term a borrower may request",
    )

    @model_validator(mode="after")
    def validate_term_bounds(self) -> "LoanSettings":
        """Ensure the term bounds describe a non-empty range."""
        if self.min_term_days > self.max_term_days:
            raise ValueError(
                f"min_term_days ({self.min_term_days}) > max_term_days ({self.max_term_days})"
            )
        return self


@lru_cache
def get_loan_settings() -> LoanSettings:
    """Get cached loan settings instance."""
    return LoanSettings()
