"""Pydantic Schemas — DTOs for the companies and employees API boundary.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - JSON keys are camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
