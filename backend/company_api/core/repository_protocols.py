"""Boundary Protocols — contracts between the services and persistence.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy directly
    - Reads that can miss return None; services turn None into tagged results
    - Nothing is persisted until RepositoryManager.save() is awaited

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - create/delete are staged on the unit of work; save() commits them together
"""

from typing import Iterable, Protocol, Sequence
from uuid import UUID

from company_api.core.domain_types import CompanyId, EmployeeId
from company_api.core.paging import EmployeeFilter
from company_api.core.sorting import SortField


class CompanyLike(Protocol):
    """Structural contract for Company entities handed to mapping and services."""
    id: UUID | None
    name: str
    address: str
    country: str | None
    employees: list


class EmployeeLike(Protocol):
    """Structural contract for Employee entities."""
    id: UUID | None
    company_id: UUID | None
    name: str
    age: int
    position: str


class CompanyRepository(Protocol):
    """Contract for company persistence — implemented by infrastructure."""
    async def get_all_companies(self) -> list: ...
    async def company_exists(self, company_id: CompanyId) -> bool: ...
    async def get_company(
        self, company_id: CompanyId, with_employees: bool = False,
    ) -> CompanyLike | None: ...
    async def get_by_ids(self, ids: Iterable[CompanyId]) -> list: ...
    def create_company(self, company: CompanyLike) -> None: ...
    async def delete_company(self, company: CompanyLike) -> None: ...


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by infrastructure."""
    async def count_matching(self, query_filter: EmployeeFilter) -> int: ...
    async def fetch_page(
        self,
        query_filter: EmployeeFilter,
        skip: int,
        take: int,
        order: Sequence[SortField],
    ) -> list: ...
    async def get_employee(
        self, company_id: CompanyId, employee_id: EmployeeId,
    ) -> EmployeeLike | None: ...
    def create_employee_for_company(
        self, company_id: CompanyId, employee: EmployeeLike,
    ) -> None: ...
    async def delete_employee(self, employee: EmployeeLike) -> None: ...


class RepositoryManager(Protocol):
    """Unit of work exposing both repositories."""
    company: CompanyRepository
    employee: EmployeeRepository

    async def save(self) -> None: ...
