"""Company Service — company use cases over the repository boundary.

Invariants:
    - A missing company is an ApiNotFoundResponse, never an exception, inside this service
    - Collection input (null or empty) is rejected before any repository call
    - get_by_ids fails unless every requested id resolves
    - Returned DTOs are mapped after save(), so ids are populated
    - Employees are loaded only by update and delete (append and cascade need them)

Design Decisions:
    - Bad-request failures stay exceptions on every surface; only not-found is tagged
"""

import logging
from typing import Sequence

from company_api.core.domain_types import CompanyId
from company_api.core.errors import (
    CollectionCountMismatchError,
    CompanyCollectionBadRequestError,
    CompanyNotFoundError,
    IdParametersBadRequestError,
)
from company_api.core.repository_protocols import RepositoryManager
from company_api.core.result import ApiBaseResponse, ApiOkResponse, not_found
from company_api.schemas.company import (
    CompanyDto, CompanyForCreationDto, CompanyForUpdateDto,
)
from company_api.services.mapping import (
    apply_company_update, company_from_creation, company_to_dto,
)

logger = logging.getLogger(__name__)


class CompanyService:
    def __init__(self, repository: RepositoryManager):
        self._repository = repository

    async def get_all_companies(self) -> ApiOkResponse[list[CompanyDto]]:
        companies = await self._repository.company.get_all_companies()
        return ApiOkResponse([company_to_dto(c) for c in companies])

    async def get_company(self, company_id: CompanyId) -> ApiBaseResponse:
        result = await self._find_company(company_id)
        if not result.success:
            return result
        return ApiOkResponse(company_to_dto(result.result))

    async def get_by_ids(self, ids: Sequence[CompanyId] | None) -> list[CompanyDto]:
        if ids is None:
            raise IdParametersBadRequestError()
        companies = await self._repository.company.get_by_ids(ids)
        if len(set(ids)) != len(companies):
            raise CollectionCountMismatchError(len(set(ids)), len(companies))
        return [company_to_dto(c) for c in companies]

    async def create_company(self, company: CompanyForCreationDto) -> CompanyDto:
        entity = company_from_creation(company)
        self._repository.company.create_company(entity)
        await self._repository.save()
        logger.info(
            f"Company created: {entity.name}", extra={"company_id": str(entity.id)},
        )
        return company_to_dto(entity)

    async def create_company_collection(
        self, company_collection: Sequence[CompanyForCreationDto] | None,
    ) -> tuple[list[CompanyDto], str]:
        """Create every company in one save; returns the DTOs and their comma-joined ids."""
        if company_collection is None:
            raise CompanyCollectionBadRequestError()
        if not company_collection:
            raise CompanyCollectionBadRequestError(
                "Company collection sent from a client is empty.",
            )
        entities = [company_from_creation(c) for c in company_collection]
        for entity in entities:
            self._repository.company.create_company(entity)
        await self._repository.save()
        companies = [company_to_dto(e) for e in entities]
        ids = ",".join(str(c.id) for c in companies)
        logger.info(f"Created {len(companies)} companies in one collection")
        return companies, ids

    async def update_company(
        self, company_id: CompanyId, company_for_update: CompanyForUpdateDto,
    ) -> ApiBaseResponse:
        result = await self._find_company(company_id, with_employees=True)
        if not result.success:
            return result
        apply_company_update(company_for_update, result.result)
        await self._repository.save()
        return ApiOkResponse(None)

    async def delete_company(self, company_id: CompanyId) -> ApiBaseResponse:
        result = await self._find_company(company_id, with_employees=True)
        if not result.success:
            return result
        await self._repository.company.delete_company(result.result)
        await self._repository.save()
        logger.info("Company deleted", extra={"company_id": str(company_id)})
        return ApiOkResponse(None)

    async def _find_company(
        self, company_id: CompanyId, with_employees: bool = False,
    ) -> ApiBaseResponse:
        company = await self._repository.company.get_company(
            company_id, with_employees=with_employees,
        )
        if company is None:
            logger.warning(
                "Company not found", extra={"company_id": str(company_id)},
            )
            return not_found(CompanyNotFoundError(company_id))
        return ApiOkResponse(company)
