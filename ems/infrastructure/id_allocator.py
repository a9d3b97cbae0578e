"""Identity Allocator — persisted monotonically increasing employee ids.

Invariants:
    - Implements core.repository_protocols.IdAllocator
    - next_id() > every value previously returned for the same counter name,
      including across process restarts and after record deletion
    - First id issued on a fresh store is 1
    - The increment is committed before the id is returned

Design Decisions:
    - Counter row read WITH FOR UPDATE: concurrent allocators on PostgreSQL
      serialize on the row (SQLite ignores it; its writer lock already serializes)
    - Gaps allowed: an id whose create later fails is never handed out again
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ems.core.domain_types import EmployeeId
from ems.models.id_counter import IdCounter

logger = logging.getLogger(__name__)

DEFAULT_COUNTER = "employee_id"


class SqlIdAllocator:
    """IdAllocator backed by a named row in id_counters."""

    def __init__(self, db: AsyncSession, counter_name: str = DEFAULT_COUNTER):
        self._db = db
        self._counter_name = counter_name

    async def next_id(self) -> EmployeeId:
        counter = await self._db.get(
            IdCounter, self._counter_name,
            populate_existing=True, with_for_update=True,
        )
        if counter is None:
            counter = IdCounter(name=self._counter_name, value=0)
            self._db.add(counter)
        counter.value += 1
        issued = counter.value
        await self._db.commit()
        logger.debug(f"Allocated id {issued} from counter '{self._counter_name}'")
        return EmployeeId(issued)
