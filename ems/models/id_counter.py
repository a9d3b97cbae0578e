"""IdCounter ORM — persisted state of the identity allocator.

Invariants:
    - One row per counter name; value is the last id handed out (0 = none yet)
    - value only ever increases

Design Decisions:
    - Named row over a DB sequence: works identically on PostgreSQL and SQLite
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from ems.db.base import Base


class IdCounter(Base):
    """Monotonic counter row."""
    __tablename__ = "id_counters"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
