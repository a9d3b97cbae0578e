"""Durable Employee Store — id → EmployeeRecord map persisted in the employees table.

Invariants:
    - Implements core.repository_protocols.EmployeeStore
    - insert/remove commit before returning: each call is one transaction
    - Reads bypass the identity map (populate_existing) so a row committed by
      another session is never served stale
    - get_for_update locks the row (SELECT ... FOR UPDATE) until the next
      commit: concurrent read-modify-write sequences on one record serialize
      across processes on PostgreSQL
    - Returned records are detached value objects, never ORM rows

Design Decisions:
    - ORM ↔ record mapping kept private to this module: core never sees models/
    - UTC re-attached on read: SQLite returns naive datetimes for timezone=True columns
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ems.core.domain_types import EmployeeId, PrincipalId, Rating
from ems.core.employee_record import EmployeeRecord
from ems.models.employee import Employee

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _to_record(row: Employee) -> EmployeeRecord:
    return EmployeeRecord(
        id=EmployeeId(row.id),
        name=row.name,
        email=row.email,
        employer_id=PrincipalId(row.employer_id),
        rating=Rating(row.rating) if row.rating is not None else None,
        transferable=row.transferable,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def _apply(row: Employee, record: EmployeeRecord) -> None:
    row.name = record.name
    row.email = record.email
    row.employer_id = record.employer_id
    row.rating = record.rating.value if record.rating is not None else None
    row.transferable = record.transferable
    row.created_at = record.created_at
    row.updated_at = record.updated_at


class SqlEmployeeStore:
    """EmployeeStore backed by one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def _load(
        self, employee_id: EmployeeId, for_update: bool = False,
    ) -> Employee | None:
        return await self._db.get(
            Employee, employee_id,
            populate_existing=True, with_for_update=for_update,
        )

    async def get(self, employee_id: EmployeeId) -> EmployeeRecord | None:
        row = await self._load(employee_id)
        return _to_record(row) if row is not None else None

    async def get_for_update(self, employee_id: EmployeeId) -> EmployeeRecord | None:
        """Like get, but holds a row lock until the caller's next insert/remove commits."""
        row = await self._load(employee_id, for_update=True)
        return _to_record(row) if row is not None else None

    async def insert(self, record: EmployeeRecord) -> EmployeeRecord | None:
        """Upsert by record.id. Returns the value it replaced, if any."""
        row = await self._load(record.id)
        previous = _to_record(row) if row is not None else None
        if row is None:
            row = Employee(id=record.id)
            self._db.add(row)
        _apply(row, record)
        await self._db.commit()
        return previous

    async def remove(self, employee_id: EmployeeId) -> EmployeeRecord | None:
        row = await self._load(employee_id)
        if row is None:
            return None
        removed = _to_record(row)
        await self._db.delete(row)
        await self._db.commit()
        return removed

    async def iterate(self) -> list[tuple[EmployeeId, EmployeeRecord]]:
        """Snapshot of all records, ordered by id."""
        result = await self._db.execute(
            select(Employee)
            .order_by(Employee.id)
            .execution_options(populate_existing=True),
        )
        return [
            (EmployeeId(row.id), _to_record(row))
            for row in result.scalars().all()
        ]
