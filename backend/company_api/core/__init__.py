"""Core Layer — pure request-shaping logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are deterministic; the only async code is the paging boundary
      that awaits the injected store

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
