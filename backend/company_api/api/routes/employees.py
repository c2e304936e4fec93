"""Employees — company-scoped employee endpoints with paging, shaping, and links.

Invariants:
    - Every route resolves the owning company first; unknown company → 404
    - GET/HEAD collection requires a valid Accept header (400 otherwise)
    - X-Pagination header carries {currentPage, pageSize, totalCount, totalPages} as JSON
    - Linked media type → {"value": [...], "links": [...]} served as the configured
      hateoas media type; otherwise a bare JSON list
    - Route names are referenced by EmployeeLinks; renaming a route breaks its links
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from company_api.api.dependencies import (
    employee_parameters, get_services, validate_media_type,
)
from company_api.config import get_settings
from company_api.core.links import LinkParameters
from company_api.core.request_parameters import EmployeeParameters
from company_api.schemas.employee import (
    EmployeeDto, EmployeeForCreationDto, EmployeeForUpdateDto,
)
from company_api.services.service_manager import ServiceManager

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/companies/{company_id}/employees", tags=["employees"],
)


@router.api_route(
    "", methods=["GET", "HEAD"], name="get_employees_for_company",
)
async def get_employees_for_company(
    company_id: UUID,
    response: Response,
    parameters: EmployeeParameters = Depends(employee_parameters),
    link_parameters: LinkParameters = Depends(validate_media_type),
    services: ServiceManager = Depends(get_services),
):
    result = await services.employee_service.get_employees(
        company_id, parameters, link_parameters,
    )
    link_response, meta_data = result.unwrap()
    if link_response.has_links:
        return JSONResponse(
            content=jsonable_encoder(link_response.body()),
            media_type=get_settings().hateoas_media_type,
            headers={"X-Pagination": meta_data.to_header()},
        )
    response.headers["X-Pagination"] = meta_data.to_header()
    return link_response.body()


@router.get(
    "/{id}", name="get_employee_for_company", response_model=EmployeeDto,
)
async def get_employee_for_company(
    company_id: UUID, id: UUID,
    services: ServiceManager = Depends(get_services),
):
    result = await services.employee_service.get_employee(company_id, id)
    return result.unwrap()


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=EmployeeDto,
)
async def create_employee_for_company(
    company_id: UUID,
    employee: EmployeeForCreationDto,
    request: Request,
    response: Response,
    services: ServiceManager = Depends(get_services),
):
    result = await services.employee_service.create_employee_for_company(
        company_id, employee,
    )
    created = result.unwrap()
    response.headers["Location"] = str(request.url_for(
        "get_employee_for_company",
        company_id=str(company_id), id=str(created.id),
    ))
    return created


@router.delete(
    "/{id}", status_code=status.HTTP_204_NO_CONTENT,
    name="delete_employee_for_company",
)
async def delete_employee_for_company(
    company_id: UUID, id: UUID,
    services: ServiceManager = Depends(get_services),
):
    result = await services.employee_service.delete_employee_for_company(
        company_id, id,
    )
    result.unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{id}", status_code=status.HTTP_204_NO_CONTENT,
    name="update_employee_for_company",
)
async def update_employee_for_company(
    company_id: UUID, id: UUID,
    employee: EmployeeForUpdateDto,
    services: ServiceManager = Depends(get_services),
):
    result = await services.employee_service.update_employee_for_company(
        company_id, id, employee,
    )
    result.unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
