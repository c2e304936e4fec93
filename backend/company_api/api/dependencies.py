"""Shared Dependencies — per-request services, query parameters, and media type checks.

Invariants:
    - One ServiceManager (one unit of work) per request, over the get_db session
    - Collection query parameters keep the original camelCase names (pageNumber, ...)
    - validate_media_type rejects a missing or malformed Accept header with 400
"""

from fastapi import Depends, Header, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from company_api.config import get_settings
from company_api.core.links import LinkParameters
from company_api.core.media_types import wants_links
from company_api.core.request_parameters import (
    MAX_AGE, EmployeeParameters,
)
from company_api.infrastructure.database import get_db
from company_api.services.service_manager import ServiceManager


def get_services(db: AsyncSession = Depends(get_db)) -> ServiceManager:
    return ServiceManager.for_session(db)


def employee_parameters(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    order_by: str | None = Query("name", alias="orderBy"),
    fields: str | None = Query(None),
    min_age: int = Query(0, alias="minAge"),
    max_age: int = Query(MAX_AGE, alias="maxAge"),
    search_term: str | None = Query(None, alias="searchTerm"),
) -> EmployeeParameters:
    return EmployeeParameters(
        page_number=page_number,
        page_size=(
            page_size if page_size is not None else get_settings().default_page_size
        ),
        order_by=order_by,
        fields=fields,
        min_age=min_age,
        max_age=max_age,
        search_term=search_term,
    )


def validate_media_type(
    request: Request, accept: str | None = Header(None),
) -> LinkParameters:
    """Check the Accept header and decide linked vs plain output for this request."""
    linked = wants_links(accept)

    def url_for(name: str, **path_params: str) -> str:
        return str(request.url_for(name, **path_params))

    return LinkParameters(
        linked=linked, url_for=url_for,
    )
