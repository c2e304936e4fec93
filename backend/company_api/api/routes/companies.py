"""Companies (v1) — CRUD and bulk endpoints that raise on not-found.

Invariants:
    - Not-found results are unwrapped into CompanyNotFoundError (→ 404 via global handler)
    - POST responses are 201 with a Location header pointing at the created resource
    - Collection routes are declared before /{id} so "collection" is never parsed as an id
    - GET responses carry Cache-Control: public (list: cache_max_age_seconds, single: 60s)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from company_api.api.dependencies import get_services
from company_api.config import get_settings
from company_api.core.data_shaper import COMPANY_FIELDS
from company_api.core.errors import IdParametersBadRequestError
from company_api.schemas.company import (
    CompanyDto, CompanyForCreationDto, CompanyForUpdateDto,
)
from company_api.services.service_manager import ServiceManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/companies", tags=["companies"])

SINGLE_COMPANY_MAX_AGE = 60


def _cache_for(response: Response, max_age: int) -> None:
    response.headers["Cache-Control"] = f"public, max-age={max_age}"


def parse_ids(ids: str) -> list[UUID] | None:
    """Parse the comma-separated id list of a collection route; blank → None."""
    parts = [p.strip() for p in ids.split(",") if p.strip()]
    if not parts:
        return None
    try:
        return [UUID(p) for p in parts]
    except ValueError:
        raise IdParametersBadRequestError()


@router.options("")
async def get_companies_options():
    return Response(
        status_code=status.HTTP_200_OK, headers={"Allow": "GET, OPTIONS, POST"},
    )


@router.get("", name="get_companies")
async def get_companies(
    response: Response,
    fields: str | None = Query(None),
    services: ServiceManager = Depends(get_services),
):
    """All companies ordered by name, optionally shaped to `fields`."""
    result = await services.company_service.get_all_companies()
    _cache_for(response, get_settings().cache_max_age_seconds)
    if fields:
        return COMPANY_FIELDS.shape_many(result.unwrap(), fields)
    return [c.model_dump(by_alias=True) for c in result.unwrap()]


@router.get("/collection/({ids})", name="get_company_collection")
async def get_company_collection(
    ids: str, services: ServiceManager = Depends(get_services),
):
    companies = await services.company_service.get_by_ids(parse_ids(ids))
    return [c.model_dump(by_alias=True) for c in companies]


@router.post(
    "/collection", status_code=status.HTTP_201_CREATED,
    response_model=list[CompanyDto],
)
async def create_company_collection(
    request: Request,
    response: Response,
    company_collection: list[CompanyForCreationDto] | None = Body(None),
    services: ServiceManager = Depends(get_services),
):
    companies, ids = await services.company_service.create_company_collection(
        company_collection,
    )
    response.headers["Location"] = str(
        request.url_for("get_company_collection", ids=ids),
    )
    return companies


@router.get("/{id}", name="get_company", response_model=CompanyDto)
async def get_company(
    id: UUID, response: Response,
    services: ServiceManager = Depends(get_services),
):
    result = await services.company_service.get_company(id)
    company = result.unwrap()
    _cache_for(response, SINGLE_COMPANY_MAX_AGE)
    return company


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=CompanyDto,
)
async def create_company(
    company: CompanyForCreationDto,
    request: Request,
    response: Response,
    services: ServiceManager = Depends(get_services),
):
    created = await services.company_service.create_company(company)
    response.headers["Location"] = str(
        request.url_for("get_company", id=str(created.id)),
    )
    return created


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    id: UUID, services: ServiceManager = Depends(get_services),
):
    result = await services.company_service.delete_company(id)
    result.unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_company(
    id: UUID,
    company: CompanyForUpdateDto,
    services: ServiceManager = Depends(get_services),
):
    result = await services.company_service.update_company(id, company)
    result.unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
