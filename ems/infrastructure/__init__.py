"""Infrastructure Layer — persistence adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All database errors mapped to DatabaseError at the session boundary

Design Decisions:
    - Thin adapters over SQLAlchemy sessions (ADR: single responsibility)
"""
