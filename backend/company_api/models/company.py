"""Company ORM — persists the aggregate root that owns employees.

Invariants:
    - id is UUID primary key, assigned on flush
    - name and address are non-nullable
    - Deleting a company deletes its employees (ORM cascade + FK ON DELETE CASCADE)

Design Decisions:
    - full_address is not a column: it exists only in CompanyDto
    - employees are lazy="raise": async sessions cannot lazy-load, so callers that
      need them (update, delete) ask for them with selectinload; reads never pay for them
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from company_api.db.base import Base


class Company(Base):
    """Company aggregate root — owns all its employees."""
    __tablename__ = "companies"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    address: Mapped[str] = mapped_column(String(60), nullable=False)
    country: Mapped[str | None] = mapped_column(String(60), nullable=True)

    employees: Mapped[list["Employee"]] = relationship(
        "Employee", back_populates="company",
        cascade="all, delete-orphan", lazy="raise",
    )
