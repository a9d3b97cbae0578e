"""Employee Record — immutable value object passed between store and engine.

Invariants:
    - id never changes after creation
    - employer_id is never empty
    - rating is None or a Rating member
    - created_at and updated_at are timezone-aware (UTC)

Design Decisions:
    - frozen dataclass: transitions produce new records via dataclasses.replace,
      so a record read from the store can never be mutated behind its back
    - Decoupled from the ORM model: core never imports models/ (ADR: dependency arrows inward)
"""

from dataclasses import dataclass
from datetime import datetime

from ems.core.domain_types import EmployeeId, PrincipalId, Rating


@dataclass(frozen=True)
class EmployeeRecord:
    id: EmployeeId
    name: str
    email: str
    employer_id: PrincipalId
    rating: Rating | None
    transferable: bool
    created_at: datetime
    updated_at: datetime | None = None

    def is_owned_by(self, caller: PrincipalId) -> bool:
        return self.employer_id == caller
