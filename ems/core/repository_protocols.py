"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - EmployeeStore mutators are atomic: each call commits or raises
    - get_for_update holds a row lock until the next insert/remove commits

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the engine awaits them around
      the pure checks and transitions
    - Map-shaped store (get/insert/remove/iterate) over a query API: primary-key
      lookup is the only access path the engine needs
"""

from typing import Protocol

from ems.core.domain_types import EmployeeId
from ems.core.employee_record import EmployeeRecord


class EmployeeStore(Protocol):
    """Durable id → EmployeeRecord map — implemented by shell."""
    async def get(self, employee_id: EmployeeId) -> EmployeeRecord | None: ...
    async def get_for_update(self, employee_id: EmployeeId) -> EmployeeRecord | None: ...
    async def insert(self, record: EmployeeRecord) -> EmployeeRecord | None: ...
    async def remove(self, employee_id: EmployeeId) -> EmployeeRecord | None: ...
    async def iterate(self) -> list[tuple[EmployeeId, EmployeeRecord]]: ...


class IdAllocator(Protocol):
    """Durable monotonically increasing id source — implemented by shell."""
    async def next_id(self) -> EmployeeId: ...
