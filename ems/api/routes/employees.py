"""Employee Routes — HTTP surface of the employee lifecycle engine.

Invariants:
    - Every route resolves the caller via get_caller (401 without it)
    - Routes map EmployeeRecord → EmployeeResponse and nothing else
    - Domain failures propagate as EmsError to the global handler (404/403/400)

Design Decisions:
    - Toggle/claim/delete return {"message": ...}: clients display the status text as-is
    - employee_id bounded to the BIGINT range at the boundary
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from ems.api.dependencies import get_caller, get_employee_service
from ems.core.domain_types import EmployeeId, PrincipalId, MAX_EMPLOYEE_ID
from ems.schemas.employee import (
    EmployeeCreate, RatingUpdate, EmployeeResponse, StatusResponse,
)
from ems.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employees", tags=["employees"])

EmployeeIdPath = Annotated[int, Path(ge=0, le=MAX_EMPLOYEE_ID)]


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    caller: PrincipalId = Depends(get_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    """All employees under the caller's employ."""
    records = await service.list_owned(caller)
    return [EmployeeResponse.from_record(r) for r in records]


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: EmployeeIdPath,
    caller: PrincipalId = Depends(get_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    record = await service.get(caller, EmployeeId(employee_id))
    return EmployeeResponse.from_record(record)


@router.post(
    "", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    caller: PrincipalId = Depends(get_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee owned by the caller."""
    record = await service.create(caller, body.name, body.email)
    return EmployeeResponse.from_record(record)


@router.put("/{employee_id}/rating", response_model=EmployeeResponse)
async def set_rating(
    body: RatingUpdate,
    employee_id: EmployeeIdPath,
    caller: PrincipalId = Depends(get_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    record = await service.set_rating(caller, EmployeeId(employee_id), body.rating)
    return EmployeeResponse.from_record(record)


@router.post("/{employee_id}/transferable", response_model=StatusResponse)
async def toggle_transferable(
    employee_id: EmployeeIdPath,
    caller: PrincipalId = Depends(get_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    """Flip whether another employer may claim this employee."""
    message = await service.toggle_transferable(caller, EmployeeId(employee_id))
    return StatusResponse(message=message)


@router.post("/{employee_id}/claim", response_model=StatusResponse)
async def claim_employee(
    employee_id: EmployeeIdPath,
    caller: PrincipalId = Depends(get_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    """Take over a transferable employee."""
    message = await service.claim_transfer(caller, EmployeeId(employee_id))
    return StatusResponse(message=message)


@router.delete("/{employee_id}", response_model=StatusResponse)
async def delete_employee(
    employee_id: EmployeeIdPath,
    caller: PrincipalId = Depends(get_caller),
    service: EmployeeService = Depends(get_employee_service),
):
    message = await service.delete(caller, EmployeeId(employee_id))
    return StatusResponse(message=message)
