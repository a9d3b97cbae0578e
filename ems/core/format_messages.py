"""Message Formatting — every user-facing string the engine returns or raises.

Invariants:
    - All functions are PURE and return str
    - Status messages are the success payload of toggle/claim/delete
    - Booleans render lowercase ("true"/"false") to match the JSON the client sees

Design Decisions:
    - Centralized strings: tests assert on the same functions the engine calls
      (ADR: no string literals duplicated between core and tests)
"""

from ems.core.domain_types import EmployeeId, RATING_VALUES


# ─── Status messages ─────────────────────────────────────────────

def format_toggled(employee_id: EmployeeId, transferable: bool) -> str:
    return (
        f"Employee with ID: {employee_id} has transferable toggled to: "
        f"{str(transferable).lower()}"
    )


def format_claimed(employee_id: EmployeeId) -> str:
    return f"Employee with ID: {employee_id} has been added to your employ"


def format_deleted(employee_id: EmployeeId) -> str:
    return f"Employee with ID: {employee_id} has been deleted"


# ─── Error messages ──────────────────────────────────────────────

def format_missing(employee_id: EmployeeId) -> str:
    return f"No employee with id={employee_id} found"


def format_no_records() -> str:
    return "No employee records found"


def format_invalid_rating() -> str:
    accepted = ", ".join(f'"{r}"' for r in RATING_VALUES)
    return f"Invalid rating type! Accepted values are: [{accepted}]"


def format_empty_field(field: str) -> str:
    return f"{field} cannot be empty"


def format_not_transferable(employee_id: EmployeeId) -> str:
    return f"Employee with ID: {employee_id} is not transferable"


def format_not_employer(action: str) -> str:
    """Denial for callers that do not own the record, e.g. action='rate'."""
    return f"Cannot {action} an employee you did not employ"
