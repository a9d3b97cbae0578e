"""Services Layer — imperative shell that drives the pure core against the store.

Invariants:
    - Services own sequencing and locking; rules and transitions live in core/
    - Services raise EmsError subclasses; the API layer maps them to HTTP

Design Decisions:
    - One service class per aggregate (ADR: no god objects)
"""
