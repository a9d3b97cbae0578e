"""Access Enforcement — who may read or mutate a record, and under which preconditions.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return an EmsError on violation, None on success — the shell raises it
    - validate_* chains the checks of one operation — first error wins
    - Read denials are NotFoundError, mutation denials are ForbiddenError
      (set_rating is the exception: its owner denial is NotFoundError)

Design Decisions:
    - Pure functions over method dispatch: testable without a store or mocks
    - Return errors (not raise): chaining with `or` keeps every rule visible
      in one expression per operation
"""

from ems.core.domain_types import EmployeeId, PrincipalId, parse_rating, RATING_VALUES
from ems.core.employee_record import EmployeeRecord
from ems.core.errors import (
    EmsError, ErrorContext, NotFoundError, ForbiddenError,
    InvalidTypeError, InvalidInputError,
)
from ems.core.format_messages import (
    format_missing, format_invalid_rating, format_empty_field,
    format_not_transferable, format_not_employer,
)


def _context(employee_id: EmployeeId | None, operation: str) -> ErrorContext:
    return ErrorContext(employee_id=employee_id, operation=operation)


# ─── Single rules ────────────────────────────────────────────────

def check_exists(
    record: EmployeeRecord | None, employee_id: EmployeeId, operation: str,
) -> EmsError | None:
    if record is None:
        return NotFoundError(
            format_missing(employee_id), _context(employee_id, operation),
        )
    return None


def check_viewer(
    record: EmployeeRecord, caller: PrincipalId, operation: str, action: str,
) -> EmsError | None:
    """Owner-only access denied as NOT_FOUND."""
    if not record.is_owned_by(caller):
        return NotFoundError(
            format_not_employer(action), _context(record.id, operation),
        )
    return None


def check_employer(
    record: EmployeeRecord, caller: PrincipalId, operation: str, action: str,
) -> EmsError | None:
    """Owner-only access denied as FORBIDDEN."""
    if not record.is_owned_by(caller):
        return ForbiddenError(
            format_not_employer(action), _context(record.id, operation),
        )
    return None


def check_transferable(record: EmployeeRecord, operation: str) -> EmsError | None:
    if not record.transferable:
        return ForbiddenError(
            format_not_transferable(record.id), _context(record.id, operation),
        )
    return None


def check_rating(
    rating: str, employee_id: EmployeeId, operation: str,
) -> EmsError | None:
    if parse_rating(rating) is None:
        return InvalidTypeError(
            format_invalid_rating(), list(RATING_VALUES),
            _context(employee_id, operation),
        )
    return None


def check_not_empty(value: str, field: str, operation: str) -> EmsError | None:
    if not value:
        return InvalidInputError(
            format_empty_field(field), field, _context(None, operation),
        )
    return None


# ─── Per-operation chains ────────────────────────────────────────

def validate_create(name: str, email: str) -> EmsError | None:
    return (
        check_not_empty(name, "name", "create")
        or check_not_empty(email, "email", "create")
    )


def validate_view(
    record: EmployeeRecord | None, employee_id: EmployeeId, caller: PrincipalId,
) -> EmsError | None:
    return (
        check_exists(record, employee_id, "get")
        or check_viewer(record, caller, "get", "view")
    )


def validate_set_rating(
    record: EmployeeRecord | None, employee_id: EmployeeId,
    caller: PrincipalId, rating: str,
) -> EmsError | None:
    return (
        check_rating(rating, employee_id, "set_rating")
        or check_exists(record, employee_id, "set_rating")
        or check_viewer(record, caller, "set_rating", "rate")
    )


def validate_toggle(
    record: EmployeeRecord | None, employee_id: EmployeeId, caller: PrincipalId,
) -> EmsError | None:
    return (
        check_exists(record, employee_id, "toggle_transferable")
        or check_employer(
            record, caller, "toggle_transferable",
            "alter the transferable status of",
        )
    )


def validate_claim(
    record: EmployeeRecord | None, employee_id: EmployeeId,
) -> EmsError | None:
    """Any caller may claim, including the current owner."""
    return (
        check_exists(record, employee_id, "claim_transfer")
        or check_transferable(record, "claim_transfer")
    )


def validate_delete(
    record: EmployeeRecord | None, employee_id: EmployeeId, caller: PrincipalId,
) -> EmsError | None:
    return (
        check_exists(record, employee_id, "delete")
        or check_employer(record, caller, "delete", "delete")
    )
