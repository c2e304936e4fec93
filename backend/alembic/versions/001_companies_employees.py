"""Initial schema — companies and their employees.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(60), nullable=False),
        sa.Column("address", sa.String(60), nullable=False),
        sa.Column("country", sa.String(60), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_companies"),
    )

    op.create_table(
        "employees",
        sa.Column("id", UUID(as_uuid=True), nullable=False),
        sa.Column("company_id", UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("position", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_employees"),
        sa.ForeignKeyConstraint(
            ["company_id"], ["companies.id"],
            name="fk_employees_company_id_companies", ondelete="CASCADE",
        ),
    )
    op.create_index(
        "ix_employees_company_id", "employees", ["company_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_employees_company_id", table_name="employees")
    op.drop_table("employees")
    op.drop_table("companies")
