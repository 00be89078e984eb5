"""
Unit Tests for lending rules, validation and the Loan entity.

Test Categories:
- test_settings_*: LoanSettings defaults and bounds
- test_due_date_*: Due date arithmetic
- test_application_* / test_extension_*: Request validation
- test_copy_*: Loan copy-with-overrides
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.application.dto import LoanApplicationRequest, LoanExtensionRequest
from src.application.validation import (
    validate_loan_application,
    validate_loan_extension,
)
from src.domain.entities import Loan
from src.service.lending import (
    LoanSettings,
    calculate_due_date,
    calculate_extended_due_date,
)


NOW = datetime(2025, 1, 31, 23, 30, tzinfo=timezone.utc)


def make_loan(**overrides) -> Loan:
    fields = dict(
        loan_id=uuid4(),
        principal_cents=50_000,
        term_days=30,
        requested_date=NOW,
        due_date=NOW + timedelta(days=30),
    )
    fields.update(overrides)
    return Loan(**fields)


# =============================================================================
# Settings
# =============================================================================

def test_settings_explicit_values():
    settings = LoanSettings(principal_cents=10_000, extension_term_days=7)

    assert settings.principal_cents == 10_000
    assert settings.extension_term_days == 7


def test_settings_reject_non_positive_principal():
    with pytest.raises(ValidationError):
        LoanSettings(principal_cents=0)


def test_settings_reject_inverted_term_bounds():
    with pytest.raises(ValidationError):
        LoanSettings(min_term_days=30, max_term_days=10)


def test_settings_are_immutable():
    settings = LoanSettings()

    with pytest.raises(ValidationError):
        settings.principal_cents = 1


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("LOAN_PRINCIPAL_CENTS", "123400")
    monkeypatch.setenv("LOAN_EXTENSION_TERM_DAYS", "9")

    settings = LoanSettings()

    assert settings.principal_cents == 123_400
    assert settings.extension_term_days == 9


# =============================================================================
# Due dates
# =============================================================================

def test_due_date_adds_term_days():
    assert calculate_due_date(NOW, 30) == datetime(2025, 3, 2, 23, 30, tzinfo=timezone.utc)


def test_due_date_extension_counts_from_previous_due_date():
    previous = datetime(2025, 3, 2, 23, 30, tzinfo=timezone.utc)

    assert calculate_extended_due_date(previous, 15) == datetime(
        2025, 3, 17, 23, 30, tzinfo=timezone.utc
    )


# =============================================================================
# Validation
# =============================================================================

@pytest.fixture
def settings() -> LoanSettings:
    return LoanSettings(min_term_days=1, max_term_days=60)


@pytest.mark.parametrize("term_days", [1, 30, 60])
def test_application_within_bounds_is_valid(settings, term_days):
    assert validate_loan_application(LoanApplicationRequest(term_days=term_days), settings) == []


@pytest.mark.parametrize("term_days", [0, -1, 61])
def test_application_out_of_bounds(settings, term_days):
    violations = validate_loan_application(LoanApplicationRequest(term_days=term_days), settings)

    assert len(violations) == 1
    assert violations[0].field == "term_days"
    assert "between 1 and 60" in violations[0].message


def test_application_missing_term(settings):
    violations = validate_loan_application(LoanApplicationRequest(term_days=None), settings)

    assert [str(v) for v in violations] == ["term_days: term_days is required"]


def test_application_reports_all_violations(settings):
    violations = validate_loan_application(
        LoanApplicationRequest(term_days=500, amount_cents=0),
        settings,
    )

    assert [v.field for v in violations] == ["term_days", "amount_cents"]


def test_application_amount_is_optional(settings):
    request = LoanApplicationRequest(term_days=10, amount_cents=None)

    assert validate_loan_application(request, settings) == []


@pytest.mark.parametrize("amount_cents", ["5", True, 12.5])
def test_application_amount_must_be_integer(settings, amount_cents):
    violations = validate_loan_application(
        LoanApplicationRequest(term_days=10, amount_cents=amount_cents),
        settings,
    )

    assert [str(v) for v in violations] == ["amount_cents: amount_cents must be an integer"]


def test_application_type_violations_are_collected(settings):
    violations = validate_loan_application(
        LoanApplicationRequest(term_days="x", amount_cents="5"),
        settings,
    )

    assert [v.field for v in violations] == ["term_days", "amount_cents"]


def test_extension_requires_loan_id():
    assert [v.field for v in validate_loan_extension(LoanExtensionRequest(loan_id=None))] == [
        "loan_id"
    ]
    assert [v.field for v in validate_loan_extension(LoanExtensionRequest(loan_id="  "))] == [
        "loan_id"
    ]


def test_extension_with_loan_id_is_valid():
    assert validate_loan_extension(LoanExtensionRequest(loan_id=uuid4())) == []


@pytest.mark.parametrize("term_days", [0, -3, "soon"])
def test_extension_term_is_not_validated(term_days):
    request = LoanExtensionRequest(loan_id=uuid4(), term_days=term_days)

    assert validate_loan_extension(request) == []


# =============================================================================
# Loan copy-with-overrides
# =============================================================================

def test_copy_gets_fresh_record_id_and_keeps_loan_id():
    loan = make_loan()

    copy = loan.copy(term_days=15)

    assert copy.id != loan.id
    assert copy.loan_id == loan.loan_id
    assert copy.principal_cents == loan.principal_cents
    assert copy.term_days == 15
    assert loan.term_days == 30


def test_copy_of_superseded_record_is_current():
    loan = make_loan(superseded_at=NOW)

    assert loan.is_superseded
    assert not loan.copy().is_superseded


def test_loan_is_immutable():
    loan = make_loan()

    with pytest.raises(AttributeError):
        loan.term_days = 99
