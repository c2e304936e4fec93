"""SQLAlchemy Repositories — company and employee persistence over one AsyncSession.

Invariants:
    - All repositories of a RepositoryManager share its session (one unit of work)
    - count_matching and fetch_page build their WHERE clause from the same filter
    - fetch_page always orders by Employee.id last (ascending unless requested) so pages are stable
    - Sort names outside EMPLOYEE_SORT_COLUMNS never reach SQL; every sortable
      employee field (id included) has a column here
    - Company employees are loaded only when asked for (with_employees)

Design Decisions:
    - Filters expressed as SQLAlchemy column expressions built per call
      (ADR: no query-builder abstraction for two entities)
"""

from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from company_api.core.paging import EmployeeFilter
from company_api.core.sorting import SortField
from company_api.models.company import Company
from company_api.models.employee import Employee

EMPLOYEE_SORT_COLUMNS = {
    "id": Employee.id,
    "name": Employee.name,
    "age": Employee.age,
    "position": Employee.position,
}


class SqlCompanyRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_all_companies(self) -> list[Company]:
        result = await self._db.execute(
            select(Company).order_by(Company.name, Company.id),
        )
        return list(result.scalars().all())

    async def company_exists(self, company_id: UUID) -> bool:
        result = await self._db.execute(
            select(Company.id).where(Company.id == company_id),
        )
        return result.scalar_one_or_none() is not None

    async def get_company(
        self, company_id: UUID, with_employees: bool = False,
    ) -> Company | None:
        query = select(Company).where(Company.id == company_id)
        if with_employees:
            query = query.options(selectinload(Company.employees))
        result = await self._db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: Iterable[UUID]) -> list[Company]:
        result = await self._db.execute(
            select(Company).where(Company.id.in_(list(ids))).order_by(Company.name),
        )
        return list(result.scalars().all())

    def create_company(self, company: Company) -> None:
        self._db.add(company)

    async def delete_company(self, company: Company) -> None:
        await self._db.delete(company)


class SqlEmployeeRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    @staticmethod
    def _conditions(query_filter: EmployeeFilter) -> list:
        conditions = [
            Employee.company_id == query_filter.company_id,
            Employee.age >= query_filter.min_age,
            Employee.age <= query_filter.max_age,
        ]
        term = query_filter.normalized_search_term
        if term:
            conditions.append(func.lower(Employee.name).contains(term, autoescape=True))
        return conditions

    async def count_matching(self, query_filter: EmployeeFilter) -> int:
        result = await self._db.execute(
            select(func.count(Employee.id)).where(*self._conditions(query_filter)),
        )
        return result.scalar_one()

    async def fetch_page(
        self,
        query_filter: EmployeeFilter,
        skip: int,
        take: int,
        order: Sequence[SortField],
    ) -> list[Employee]:
        order_by = []
        for sort_field in order:
            column = EMPLOYEE_SORT_COLUMNS.get(sort_field.name)
            if column is not None:
                order_by.append(column.desc() if sort_field.descending else column.asc())
        if not any(sort_field.name == "id" for sort_field in order):
            order_by.append(Employee.id.asc())
        result = await self._db.execute(
            select(Employee)
            .where(*self._conditions(query_filter))
            .order_by(*order_by)
            .offset(skip)
            .limit(take),
        )
        return list(result.scalars().all())

    async def get_employee(
        self, company_id: UUID, employee_id: UUID,
    ) -> Employee | None:
        result = await self._db.execute(
            select(Employee).where(
                Employee.company_id == company_id, Employee.id == employee_id,
            ),
        )
        return result.scalar_one_or_none()

    def create_employee_for_company(
        self, company_id: UUID, employee: Employee,
    ) -> None:
        employee.company_id = company_id
        self._db.add(employee)

    async def delete_employee(self, employee: Employee) -> None:
        await self._db.delete(employee)


class SqlRepositoryManager:
    """Unit of work: both repositories plus commit."""

    def __init__(self, db: AsyncSession):
        self._db = db
        self.company = SqlCompanyRepository(db)
        self.employee = SqlEmployeeRepository(db)

    async def save(self) -> None:
        await self._db.commit()
