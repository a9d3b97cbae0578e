"""Shared builders for pure-core tests."""

from datetime import datetime, timezone

from ems.core.domain_types import EmployeeId, PrincipalId
from ems.core.employee_record import EmployeeRecord

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)
T1 = datetime(2026, 1, 2, tzinfo=timezone.utc)

OWNER = PrincipalId("owner-principal")
OTHER = PrincipalId("other-principal")


def make_record(**overrides) -> EmployeeRecord:
    fields = dict(
        id=EmployeeId(1),
        name="Ada",
        email="ada@example.com",
        employer_id=OWNER,
        rating=None,
        transferable=False,
        created_at=T0,
        updated_at=T0,
    )
    fields.update(overrides)
    return EmployeeRecord(**fields)
