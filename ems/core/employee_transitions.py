"""Employee Transitions — pure state changes applied to a record.

Invariants:
    - All functions are PURE: return a NEW EmployeeRecord, never mutate the input
    - Every transition sets updated_at to the supplied `now`
    - id and created_at are never touched after new_employee()
    - transfer_to() does NOT reset transferable (the flag survives ownership change)

Design Decisions:
    - `now` passed in by the shell: core never reads the clock, tests control time
    - Preconditions live in enforce_access.py; transitions assume they passed
"""

from dataclasses import replace
from datetime import datetime

from ems.core.domain_types import EmployeeId, PrincipalId, Rating
from ems.core.employee_record import EmployeeRecord


def new_employee(
    employee_id: EmployeeId, name: str, email: str,
    caller: PrincipalId, now: datetime,
) -> EmployeeRecord:
    """Fresh record owned by the caller: unrated, not transferable."""
    return EmployeeRecord(
        id=employee_id,
        name=name,
        email=email,
        employer_id=caller,
        rating=None,
        transferable=False,
        created_at=now,
        updated_at=now,
    )


def assign_rating(
    record: EmployeeRecord, rating: Rating, now: datetime,
) -> EmployeeRecord:
    return replace(record, rating=rating, updated_at=now)


def flip_transferable(record: EmployeeRecord, now: datetime) -> EmployeeRecord:
    return replace(record, transferable=not record.transferable, updated_at=now)


def transfer_to(
    record: EmployeeRecord, new_employer: PrincipalId, now: datetime,
) -> EmployeeRecord:
    return replace(record, employer_id=new_employer, updated_at=now)


def owned_by(
    records: list[EmployeeRecord], caller: PrincipalId,
) -> list[EmployeeRecord]:
    """Filter preserving input order."""
    return [r for r in records if r.is_owned_by(caller)]
