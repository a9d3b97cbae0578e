"""Employee ORM — backing table of the durable employee map.

Invariants:
    - id is an allocator-issued BIGINT primary key (never autoincremented by the DB)
    - employer_id is non-nullable: no ownerless rows
    - rating is NULL or one of the Rating values (enforced by the engine)

Design Decisions:
    - rating stored as String, not a DB enum: adding a value needs no migration
    - Timestamps stored timezone-aware; SQLite drops tzinfo, the store re-attaches UTC
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ems.core.domain_types import MAX_PRINCIPAL_LENGTH
from ems.db.base import Base


class Employee(Base):
    """One employee record, keyed by allocator id."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    employer_id: Mapped[str] = mapped_column(
        String(MAX_PRINCIPAL_LENGTH), nullable=False,
    )
    rating: Mapped[str | None] = mapped_column(String(20), nullable=True)
    transferable: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
