"""Employee Service — employee use cases scoped by their owning company.

Invariants:
    - Every operation checks the company exists first (id-only query, employees
      never loaded); a missing company or employee is an ApiNotFoundResponse
    - An invalid age range or unknown shaping field fails before any storage call
    - get_employees returns the shaped/linked page plus its paging MetaData
"""

import logging

from company_api.core.data_shaper import EMPLOYEE_FIELDS
from company_api.core.domain_types import CompanyId, EmployeeId
from company_api.core.errors import (
    CompanyNotFoundError, EmployeeNotFoundError, MaxAgeRangeBadRequestError,
)
from company_api.core.links import EmployeeLinks, LinkParameters, LinkResponse
from company_api.core.paging import EmployeeFilter, MetaData, fetch_paged
from company_api.core.repository_protocols import RepositoryManager
from company_api.core.request_parameters import EmployeeParameters
from company_api.core.result import ApiBaseResponse, ApiOkResponse, not_found
from company_api.core.sorting import parse_order_by
from company_api.schemas.employee import (
    EmployeeForCreationDto, EmployeeForUpdateDto,
)
from company_api.services.mapping import (
    apply_employee_update, employee_from_creation, employee_to_dto,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(
        self, repository: RepositoryManager, links: EmployeeLinks | None = None,
    ):
        self._repository = repository
        self._links = links or EmployeeLinks()

    async def get_employees(
        self,
        company_id: CompanyId,
        parameters: EmployeeParameters,
        link_parameters: LinkParameters,
    ) -> ApiBaseResponse:
        """Page of employees → ApiOkResponse((LinkResponse, MetaData))."""
        if not parameters.valid_age_range:
            raise MaxAgeRangeBadRequestError()
        EMPLOYEE_FIELDS.resolve(parameters.fields)
        company = await self._check_company(company_id)
        if not company.success:
            return company

        page = await fetch_paged(
            self._repository.employee,
            EmployeeFilter(
                company_id=company_id,
                min_age=parameters.min_age,
                max_age=parameters.max_age,
                search_term=parameters.search_term,
            ),
            parameters,
            parse_order_by(parameters.order_by, EMPLOYEE_FIELDS.field_names),
        )
        employees = [employee_to_dto(e) for e in page.items]
        link_response: LinkResponse = self._links.try_generate_links(
            employees, parameters.fields, company_id, link_parameters,
        )
        meta_data: MetaData = page.meta_data
        return ApiOkResponse((link_response, meta_data))

    async def get_employee(
        self, company_id: CompanyId, employee_id: EmployeeId,
    ) -> ApiBaseResponse:
        result = await self._find_employee(company_id, employee_id)
        if not result.success:
            return result
        return ApiOkResponse(employee_to_dto(result.result))

    async def create_employee_for_company(
        self, company_id: CompanyId, employee: EmployeeForCreationDto,
    ) -> ApiBaseResponse:
        company = await self._check_company(company_id)
        if not company.success:
            return company
        entity = employee_from_creation(employee)
        self._repository.employee.create_employee_for_company(company_id, entity)
        await self._repository.save()
        logger.info(
            f"Employee created: {entity.name}",
            extra={"company_id": str(company_id), "employee_id": str(entity.id)},
        )
        return ApiOkResponse(employee_to_dto(entity))

    async def update_employee_for_company(
        self, company_id: CompanyId, employee_id: EmployeeId,
        employee_for_update: EmployeeForUpdateDto,
    ) -> ApiBaseResponse:
        result = await self._find_employee(company_id, employee_id)
        if not result.success:
            return result
        apply_employee_update(employee_for_update, result.result)
        await self._repository.save()
        return ApiOkResponse(None)

    async def delete_employee_for_company(
        self, company_id: CompanyId, employee_id: EmployeeId,
    ) -> ApiBaseResponse:
        result = await self._find_employee(company_id, employee_id)
        if not result.success:
            return result
        await self._repository.employee.delete_employee(result.result)
        await self._repository.save()
        logger.info(
            "Employee deleted",
            extra={"company_id": str(company_id), "employee_id": str(employee_id)},
        )
        return ApiOkResponse(None)

    async def _check_company(self, company_id: CompanyId) -> ApiBaseResponse:
        if not await self._repository.company.company_exists(company_id):
            logger.warning(
                "Company not found", extra={"company_id": str(company_id)},
            )
            return not_found(CompanyNotFoundError(company_id))
        return ApiOkResponse(company_id)

    async def _find_employee(
        self, company_id: CompanyId, employee_id: EmployeeId,
    ) -> ApiBaseResponse:
        company = await self._check_company(company_id)
        if not company.success:
            return company
        employee = await self._repository.employee.get_employee(company_id, employee_id)
        if employee is None:
            logger.warning(
                "Employee not found",
                extra={"company_id": str(company_id), "employee_id": str(employee_id)},
            )
            return not_found(EmployeeNotFoundError(employee_id))
        return ApiOkResponse(employee)
