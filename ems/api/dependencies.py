"""API Dependencies — caller identity and service wiring for route handlers.

Invariants:
    - Every employee route resolves the caller through get_caller (no anonymous calls)
    - The caller principal is trimmed and otherwise opaque (never parsed or verified here)
    - Principals longer than the employer_id column are refused with 401 before
      any id is allocated
    - One EmployeeService per request, sharing the process-wide write lock

Design Decisions:
    - Header-based identity: authentication happens upstream (gateway/host),
      this service trusts the principal it is handed
    - Lock read from db_manager at request time, not import time: db_manager is
      created in the lifespan and replaced in tests
"""

import asyncio

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ems.config import get_settings
from ems.core.domain_types import PrincipalId, MAX_PRINCIPAL_LENGTH
from ems.core.errors import UnauthenticatedError
from ems.infrastructure import database
from ems.infrastructure.database import get_db
from ems.infrastructure.employee_store import SqlEmployeeStore
from ems.infrastructure.id_allocator import SqlIdAllocator
from ems.services.employee_service import EmployeeService


async def get_caller(request: Request) -> PrincipalId:
    """Principal of the current invoker, from the configured header."""
    header = get_settings().caller_header
    principal = (request.headers.get(header) or "").strip()
    if not principal:
        raise UnauthenticatedError(header)
    if len(principal) > MAX_PRINCIPAL_LENGTH:
        raise UnauthenticatedError(
            header, f"Caller identity longer than {MAX_PRINCIPAL_LENGTH} characters",
        )
    return PrincipalId(principal)


def get_write_lock() -> asyncio.Lock:
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    return database.db_manager.write_lock


async def get_employee_service(
    db: AsyncSession = Depends(get_db),
    lock: asyncio.Lock = Depends(get_write_lock),
) -> EmployeeService:
    return EmployeeService(
        SqlEmployeeStore(db),
        SqlIdAllocator(db, get_settings().id_counter_name),
        lock,
    )
