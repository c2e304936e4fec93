"""Service Manager — composes the services over one unit of work per request."""

from sqlalchemy.ext.asyncio import AsyncSession

from company_api.core.repository_protocols import RepositoryManager
from company_api.infrastructure.repositories import SqlRepositoryManager
from company_api.services.company_service import CompanyService
from company_api.services.employee_service import EmployeeService


class ServiceManager:
    def __init__(self, repository: RepositoryManager):
        self.company_service = CompanyService(repository)
        self.employee_service = EmployeeService(repository)

    @classmethod
    def for_session(cls, db: AsyncSession) -> "ServiceManager":
        return cls(SqlRepositoryManager(db))
