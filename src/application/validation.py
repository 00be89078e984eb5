"""Constraint checks for loan requests.

Each check returns every violated constraint rather than stopping at the
first one.
"""

from typing import Any, List

from src.application.dto import LoanApplicationRequest, LoanExtensionRequest
from src.domain.exceptions import Violation
from src.service.lending import LoanSettings


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_loan_application(
    request: LoanApplicationRequest,
    settings: LoanSettings,
) -> List[Violation]:
    violations = []

    if request.term_days is None:
        violations.append(Violation("term_days", "term_days is required"))
    elif not is_integer(request.term_days):
        violations.append(Violation("term_days", "term_days must be an integer"))
    elif not settings.min_term_days <= request.term_days <= settings.max_term_days:
        violations.append(
            Violation(
                "term_days",
                f"term_days must be between {settings.min_term_days} "
                f"and {settings.max_term_days}",
            )
        )

    if request.amount_cents is not None:
        if not is_integer(request.amount_cents):
            violations.append(Violation("amount_cents", "amount_cents must be an integer"))
        elif request.amount_cents <= 0:
            violations.append(Violation("amount_cents", "amount_cents must be positive"))

    return violations


def validate_loan_extension(request: LoanExtensionRequest) -> List[Violation]:
    violations = []

    if request.loan_id is None or not str(request.loan_id).strip():
        violations.append(Violation("loan_id", "loan_id is required"))

    return violations
