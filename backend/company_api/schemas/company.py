"""Company Schemas — DTOs for company reads and writes.

Invariants:
    - name: 1-60 chars, address: 1-60 chars, both stripped
    - fullAddress exists only on CompanyDto (address + " " + country)
    - employees on creation/update are added to the company, never replaced

Design Decisions:
    - Update reuses the creation shape: PUT may append employees like POST
"""

from uuid import UUID

from pydantic import Field, field_validator

from company_api.schemas.base import CamelModel
from company_api.schemas.employee import EmployeeForCreationDto


class CompanyDto(CamelModel):
    """Company response — public-facing company data."""
    id: UUID | None = None
    name: str
    full_address: str


class CompanyForManipulationDto(CamelModel):
    name: str = Field(min_length=1, max_length=60)
    address: str = Field(min_length=1, max_length=60)
    country: str | None = Field(None, max_length=60)
    employees: list[EmployeeForCreationDto] | None = None

    @field_validator("name", "address")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class CompanyForCreationDto(CompanyForManipulationDto):
    pass


class CompanyForUpdateDto(CompanyForManipulationDto):
    pass


class ErrorDetails(CamelModel):
    """Error body rendered from a tagged result (v2 surface)."""
    status_code: int
    message: str
