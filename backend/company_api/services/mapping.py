"""DTO Mapping — explicit conversions between ORM entities and API DTOs.

Invariants:
    - fullAddress = address + " " + country, computed here and nowhere else
    - Creation DTOs never carry an id; entity ids appear only after flush
    - Updates overwrite scalar fields and append (never replace) employees
"""

from company_api.models.company import Company
from company_api.models.employee import Employee
from company_api.schemas.company import (
    CompanyDto, CompanyForCreationDto, CompanyForUpdateDto,
)
from company_api.schemas.employee import (
    EmployeeDto, EmployeeForCreationDto, EmployeeForUpdateDto,
)


def full_address(address: str, country: str | None) -> str:
    return " ".join(part for part in (address, country) if part is not None)


def company_to_dto(company: Company) -> CompanyDto:
    return CompanyDto(
        id=company.id,
        name=company.name,
        full_address=full_address(company.address, company.country),
    )


def company_from_creation(dto: CompanyForCreationDto) -> Company:
    return Company(
        name=dto.name,
        address=dto.address,
        country=dto.country,
        employees=[employee_from_creation(e) for e in dto.employees or []],
    )


def apply_company_update(dto: CompanyForUpdateDto, company: Company) -> Company:
    company.name = dto.name
    company.address = dto.address
    company.country = dto.country
    for employee in dto.employees or []:
        company.employees.append(employee_from_creation(employee))
    return company


def employee_to_dto(employee: Employee) -> EmployeeDto:
    return EmployeeDto(
        id=employee.id,
        name=employee.name,
        age=employee.age,
        position=employee.position,
    )


def employee_from_creation(dto: EmployeeForCreationDto) -> Employee:
    return Employee(name=dto.name, age=dto.age, position=dto.position)


def apply_employee_update(dto: EmployeeForUpdateDto, employee: Employee) -> Employee:
    employee.name = dto.name
    employee.age = dto.age
    employee.position = dto.position
    return employee

