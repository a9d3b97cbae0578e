"""Employee Schemas — Pydantic models for the employee endpoints.

Invariants:
    - EmployeeCreate/RatingUpdate only bound lengths: empty names and unknown
      ratings reach the engine and fail with INVALID_INPUT / INVALID_TYPE
    - EmployeeResponse mirrors EmployeeRecord field-for-field

Design Decisions:
    - rating typed as plain str on input (not Literal): the engine owns the
      closed set and its error message
    - from_record() classmethod keeps routes free of mapping code
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ems.core.employee_record import EmployeeRecord


class EmployeeCreate(BaseModel):
    """Employee creation payload."""
    name: str = Field(max_length=200)
    email: str = Field(max_length=320)


class RatingUpdate(BaseModel):
    """Rating assignment payload."""
    rating: str = Field(max_length=50)


class EmployeeResponse(BaseModel):
    """Employee response — public-facing record data."""
    id: int
    name: str
    email: str
    employer_id: str
    rating: str | None = None
    transferable: bool
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "EmployeeResponse":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            employer_id=record.employer_id,
            rating=record.rating.value if record.rating is not None else None,
            transferable=record.transferable,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class StatusResponse(BaseModel):
    """Plain status message returned by toggle/claim/delete."""
    message: str
