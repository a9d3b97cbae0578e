"""ORM Models — SQLAlchemy declarative models for persisted state.

Invariants:
    - All models inherit from Base (db/base.py)
    - Persisted state is exactly two tables: employees and id_counters

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from ems.models.employee import Employee  # noqa: F401
from ems.models.id_counter import IdCounter  # noqa: F401
