"""ORM Models — SQLAlchemy declarative models for companies and employees.

Invariants:
    - All models inherit from Base (db/base.py)
    - Company is the aggregate root; employees scoped by company_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from company_api.models.company import Company  # noqa: F401
from company_api.models.employee import Employee  # noqa: F401
