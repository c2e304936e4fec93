"""Employee Schemas — DTOs for employee reads and writes.

Invariants:
    - name: 1-30 chars, stripped; position: 1-20 chars, stripped
    - age: >= 18 (workers only)
    - EmployeeForCreationDto and EmployeeForUpdateDto share one validated shape
"""

from uuid import UUID

from pydantic import Field, field_validator

from company_api.schemas.base import CamelModel


class EmployeeDto(CamelModel):
    """Employee response — public-facing employee data."""
    id: UUID | None = None
    name: str
    age: int
    position: str


class EmployeeForManipulationDto(CamelModel):
    """Fields a client may set on an employee."""
    name: str = Field(min_length=1, max_length=30)
    age: int = Field(ge=18)
    position: str = Field(min_length=1, max_length=20)

    @field_validator("name", "position")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class EmployeeForCreationDto(EmployeeForManipulationDto):
    pass


class EmployeeForUpdateDto(EmployeeForManipulationDto):
    pass
