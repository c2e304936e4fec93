"""Companies (v2) — read endpoints rendered straight from tagged results.

Invariants:
    - A missing company is rendered by process_error as {"statusCode": 404, "message"};
      no exception is raised for it
    - Bad-request and validation failures still raise and reach the global handlers
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from company_api.api.dependencies import get_services
from company_api.api.responses import process_error
from company_api.schemas.company import CompanyDto
from company_api.services.service_manager import ServiceManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v2/companies", tags=["companies-v2"])


@router.get("", response_model=list[CompanyDto])
async def get_companies(services: ServiceManager = Depends(get_services)):
    result = await services.company_service.get_all_companies()
    return result.result


@router.get("/{id}", response_model=CompanyDto)
async def get_company(
    id: UUID, services: ServiceManager = Depends(get_services),
):
    result = await services.company_service.get_company(id)
    if not result.success:
        return process_error(result)
    return result.result
