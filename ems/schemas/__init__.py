"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary (types, lengths)
    - Business rules (empty fields, rating values) stay in core/ so every
      caller of the service gets the same typed errors

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
