"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps a non-negative 64-bit (BIGINT) int issued by the identity allocator
    - PrincipalId wraps the opaque caller identity supplied by the host,
      at most MAX_PRINCIPAL_LENGTH characters
    - Rating is a closed set — no raw string matching outside parse_rating()

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Rating: serializes to JSON and to the DB column without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)
PrincipalId = NewType("PrincipalId", str)

# Largest value a BIGINT primary key can hold
MAX_EMPLOYEE_ID = 2**63 - 1

# Width of the employer_id column; longer principals are refused at the edge
MAX_PRINCIPAL_LENGTH = 200


# ─── Enums ───────────────────────────────────────────────────────

class Rating(str, Enum):
    """Performance rating — the only values an employee record accepts."""
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    SATISFACTORY = "satisfactory"
    POOR = "poor"


RATING_VALUES: tuple[str, ...] = tuple(r.value for r in Rating)


def parse_rating(value: str) -> Rating | None:
    """Exact, case-sensitive lookup. None when value is outside the set."""
    try:
        return Rating(value)
    except ValueError:
        return None
