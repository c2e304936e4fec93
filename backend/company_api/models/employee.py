"""Employee ORM — a person working for exactly one company.

Invariants:
    - Always belongs to a Company (company_id FK, non-nullable)
    - Removed with its company (ON DELETE CASCADE)
"""

import uuid

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from company_api.db.base import Base


class Employee(Base):
    """Employee entity — scoped by company_id."""
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    company_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[str] = mapped_column(String(20), nullable=False)

    company: Mapped["Company"] = relationship(
        "Company", back_populates="employees",
    )
