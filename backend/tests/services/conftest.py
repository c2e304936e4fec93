"""Service test fixtures — fake repositories that record every call.

Invariants:
    - Fakes satisfy the Protocols in core/repository_protocols.py structurally
    - Every repository call is appended to FakeRepositoryManager.calls in order
"""

import uuid

import pytest

from company_api.core.sorting import SortField


class FakeCompanyRepository:
    def __init__(self, manager):
        self._manager = manager
        self.companies = {}

    async def get_all_companies(self):
        self._manager.calls.append("company.get_all_companies")
        return sorted(self.companies.values(), key=lambda c: c.name)

    async def company_exists(self, company_id):
        self._manager.calls.append("company.company_exists")
        return company_id in self.companies

    async def get_company(self, company_id, with_employees=False):
        self._manager.calls.append(
            "company.get_company+employees" if with_employees else "company.get_company",
        )
        return self.companies.get(company_id)

    async def get_by_ids(self, ids):
        self._manager.calls.append("company.get_by_ids")
        return [self.companies[i] for i in ids if i in self.companies]

    def create_company(self, company):
        self._manager.calls.append("company.create_company")
        self._manager.pending.append(company)

    async def delete_company(self, company):
        self._manager.calls.append("company.delete_company")
        self.companies.pop(company.id, None)


class FakeEmployeeRepository:
    def __init__(self, manager):
        self._manager = manager
        self.employees = {}
        self.last_order: list[SortField] = []

    def _matching(self, query_filter):
        term = query_filter.normalized_search_term
        return [
            e for e in self.employees.values()
            if e.company_id == query_filter.company_id
            and query_filter.min_age <= e.age <= query_filter.max_age
            and (term is None or term in e.name.lower())
        ]

    async def count_matching(self, query_filter):
        self._manager.calls.append("employee.count_matching")
        return len(self._matching(query_filter))

    async def fetch_page(self, query_filter, skip, take, order):
        self._manager.calls.append("employee.fetch_page")
        self.last_order = list(order)
        items = sorted(self._matching(query_filter), key=lambda e: str(e.id))
        for sort_field in reversed(order):
            items.sort(
                key=lambda e: getattr(e, sort_field.name),
                reverse=sort_field.descending,
            )
        return items[skip:skip + take]

    async def get_employee(self, company_id, employee_id):
        self._manager.calls.append("employee.get_employee")
        employee = self.employees.get(employee_id)
        if employee is None or employee.company_id != company_id:
            return None
        return employee

    def create_employee_for_company(self, company_id, employee):
        self._manager.calls.append("employee.create_employee_for_company")
        employee.company_id = company_id
        self._manager.pending.append(employee)

    async def delete_employee(self, employee):
        self._manager.calls.append("employee.delete_employee")
        self.employees.pop(employee.id, None)


class FakeRepositoryManager:
    """In-memory unit of work; save() assigns ids the way a flush would."""

    def __init__(self):
        self.calls: list[str] = []
        self.pending: list = []
        self.company = FakeCompanyRepository(self)
        self.employee = FakeEmployeeRepository(self)

    async def save(self):
        self.calls.append("save")
        for entity in self.pending:
            if entity.id is None:
                entity.id = uuid.uuid4()
            if hasattr(entity, "employees"):
                self.company.companies[entity.id] = entity
                for employee in entity.employees:
                    if employee.id is None:
                        employee.id = uuid.uuid4()
                    employee.company_id = entity.id
                    self.employee.employees[employee.id] = employee
            else:
                self.employee.employees[entity.id] = entity
        self.pending.clear()


@pytest.fixture
def repository():
    return FakeRepositoryManager()
