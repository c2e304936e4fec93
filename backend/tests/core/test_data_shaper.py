"""Data Shaper — field projection over company and employee DTOs.

Tests:
    - No fields → every field in declared order
    - Requested fields → id first, then request order, duplicates collapsed
    - Case-insensitive matching with canonical output keys
    - Unknown field raises UnknownShapeFieldError (400)
"""

from uuid import uuid4

import pytest

from company_api.core.data_shaper import (
    COMPANY_FIELDS, EMPLOYEE_FIELDS, FieldRegistry,
)
from company_api.core.errors import UnknownShapeFieldError
from company_api.schemas.company import CompanyDto
from company_api.schemas.employee import EmployeeDto


@pytest.fixture
def company():
    return CompanyDto(id=uuid4(), name="Acme", full_address="1 Main St USA")


@pytest.fixture
def employee():
    return EmployeeDto(id=uuid4(), name="Sam Raiden", age=26, position="Developer")


def test_no_fields_returns_everything(company):
    assert COMPANY_FIELDS.shape(company) == {
        "id": company.id, "name": "Acme", "fullAddress": "1 Main St USA",
    }
    assert list(COMPANY_FIELDS.shape(company, "  ")) == ["id", "name", "fullAddress"]


def test_id_is_always_included_first(company):
    shaped = COMPANY_FIELDS.shape(company, "name")
    assert shaped == {"id": company.id, "name": "Acme"}
    assert list(shaped)[0] == "id"


def test_requested_order_is_kept(employee):
    shaped = EMPLOYEE_FIELDS.shape(employee, "position,age")
    assert list(shaped) == ["id", "position", "age"]


def test_duplicates_collapse(employee):
    assert list(EMPLOYEE_FIELDS.shape(employee, "age, AGE, id")) == ["id", "age"]


def test_field_names_match_case_insensitively(company):
    shaped = COMPANY_FIELDS.shape(company, "FULLADDRESS")
    assert shaped == {"id": company.id, "fullAddress": "1 Main St USA"}


def test_unknown_field_is_rejected(company):
    with pytest.raises(UnknownShapeFieldError) as exc_info:
        COMPANY_FIELDS.shape(company, "name,bogus")
    assert exc_info.value.http_status == 400
    assert exc_info.value.field_name == "bogus"


def test_shape_many_projects_each_entity(employee):
    other = EmployeeDto(id=uuid4(), name="Jana McLeaf", age=30, position="Manager")
    shaped = EMPLOYEE_FIELDS.shape_many([employee, other], "name")
    assert shaped == [
        {"id": employee.id, "name": "Sam Raiden"},
        {"id": other.id, "name": "Jana McLeaf"},
    ]


def test_shape_many_of_nothing_is_empty():
    assert EMPLOYEE_FIELDS.shape_many([], "name") == []


def test_registry_requires_id_accessor():
    with pytest.raises(ValueError):
        FieldRegistry("id", {"name": lambda e: e.name})
