import pytest

from shared.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    InvalidStateTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, status_code, code",
    [
        (ValidationError, 400, "validation_error"),
        (NotFoundError, 404, "not_found"),
        (ConflictError, 409, "conflict"),
        (InvalidStateTransitionError, 409, "invalid_state_transition"),
        (BusinessRuleViolationError, 422, "business_rule_violation"),
        (StorageError, 500, "storage_error"),
    ],
)
def test_error_categories(error, status_code, code):
    exc = error("boom")
    assert exc.status_code == status_code
    assert exc.code == code
    assert exc.message == "boom"
