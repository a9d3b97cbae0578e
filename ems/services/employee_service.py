"""Employee Lifecycle Engine — authorization and state transitions over the durable store.

Invariants:
    - Caller identity is an explicit argument of every operation (never ambient)
    - Each operation: read → pure check (enforce_access) → pure transition → write
    - No record is held across two operations; every write goes through the store
    - Mutations run under write_lock: concurrent creates never share an id and
      read-modify-write sequences never interleave within one process
    - Mutations read through get_for_update: the row lock serializes them
      against other processes sharing the database
    - delete checks ownership on a non-destructive read BEFORE removing, so a
      denied delete never takes the record out of the store
    - claim_transfer leaves `transferable` set after a transfer

Design Decisions:
    - Imperative shell around core/ pure functions (ADR: impureim sandwich)
    - Store and allocator injected as Protocols: tests can swap either
    - Clock injected: tests observe updated_at changes deterministically
    - list_owned raises NotFoundError on an empty result instead of returning []
      (kept for API compatibility with existing clients)
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from ems.core.domain_types import EmployeeId, PrincipalId, Rating
from ems.core.employee_record import EmployeeRecord
from ems.core.errors import NotFoundError, ErrorContext
from ems.core.repository_protocols import EmployeeStore, IdAllocator
from ems.core.enforce_access import (
    validate_create, validate_view, validate_set_rating,
    validate_toggle, validate_claim, validate_delete,
)
from ems.core.employee_transitions import (
    new_employee, assign_rating, flip_transferable, transfer_to, owned_by,
)
from ems.core.format_messages import (
    format_toggled, format_claimed, format_deleted, format_no_records,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeService:
    """Owner-scoped CRUD and transfer operations for employee records."""

    def __init__(
        self,
        store: EmployeeStore,
        allocator: IdAllocator,
        lock: asyncio.Lock,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._store = store
        self._allocator = allocator
        self._lock = lock
        self._clock = clock

    # ─── Reads ──────────────────────────────────────────────────

    async def list_owned(self, caller: PrincipalId) -> list[EmployeeRecord]:
        """All records employed by caller, ordered by id."""
        entries = await self._store.iterate()
        owned = owned_by([record for _, record in entries], caller)
        if not owned:
            raise NotFoundError(
                format_no_records(), ErrorContext(operation="list_owned"),
            )
        return owned

    async def get(
        self, caller: PrincipalId, employee_id: EmployeeId,
    ) -> EmployeeRecord:
        record = await self._store.get(employee_id)
        error = validate_view(record, employee_id, caller)
        if error:
            self._log_denial(error.code, caller, employee_id, "get")
            raise error
        return record

    # ─── Mutations ──────────────────────────────────────────────

    async def create(
        self, caller: PrincipalId, name: str, email: str,
    ) -> EmployeeRecord:
        error = validate_create(name, email)
        if error:
            raise error
        async with self._lock:
            employee_id = await self._allocator.next_id()
            record = new_employee(employee_id, name, email, caller, self._clock())
            await self._store.insert(record)
        logger.info(
            f"Employee {employee_id} created",
            extra={"employee_id": employee_id, "caller": caller, "operation": "create"},
        )
        return record

    async def set_rating(
        self, caller: PrincipalId, employee_id: EmployeeId, rating: str,
    ) -> EmployeeRecord:
        async with self._lock:
            record = await self._store.get_for_update(employee_id)
            error = validate_set_rating(record, employee_id, caller, rating)
            if error:
                self._log_denial(error.code, caller, employee_id, "set_rating")
                raise error
            updated = assign_rating(record, Rating(rating), self._clock())
            await self._store.insert(updated)
        return updated

    async def toggle_transferable(
        self, caller: PrincipalId, employee_id: EmployeeId,
    ) -> str:
        async with self._lock:
            record = await self._store.get_for_update(employee_id)
            error = validate_toggle(record, employee_id, caller)
            if error:
                self._log_denial(error.code, caller, employee_id, "toggle_transferable")
                raise error
            updated = flip_transferable(record, self._clock())
            await self._store.insert(updated)
        return format_toggled(employee_id, updated.transferable)

    async def claim_transfer(
        self, caller: PrincipalId, employee_id: EmployeeId,
    ) -> str:
        async with self._lock:
            record = await self._store.get_for_update(employee_id)
            error = validate_claim(record, employee_id)
            if error:
                self._log_denial(error.code, caller, employee_id, "claim_transfer")
                raise error
            previous_employer = record.employer_id
            updated = transfer_to(record, caller, self._clock())
            await self._store.insert(updated)
        logger.info(
            f"Employee {employee_id} transferred from {previous_employer}",
            extra={
                "employee_id": employee_id, "caller": caller,
                "operation": "claim_transfer",
            },
        )
        return format_claimed(employee_id)

    async def delete(self, caller: PrincipalId, employee_id: EmployeeId) -> str:
        async with self._lock:
            record = await self._store.get_for_update(employee_id)
            error = validate_delete(record, employee_id, caller)
            if error:
                self._log_denial(error.code, caller, employee_id, "delete")
                raise error
            await self._store.remove(employee_id)
        logger.info(
            f"Employee {employee_id} deleted",
            extra={"employee_id": employee_id, "caller": caller, "operation": "delete"},
        )
        return format_deleted(employee_id)

    # ─── Helpers ────────────────────────────────────────────────

    @staticmethod
    def _log_denial(
        code: str, caller: PrincipalId, employee_id: EmployeeId, operation: str,
    ) -> None:
        logger.warning(
            f"{operation} rejected for employee {employee_id}",
            extra={
                "employee_id": employee_id, "caller": caller,
                "operation": operation, "error_code": code,
            },
        )
