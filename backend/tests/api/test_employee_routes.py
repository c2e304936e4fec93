"""Employee Routes — paging header, filtering, sorting, shaping, links, and CRUD.

Invariants:
    - X-Pagination is JSON {currentPage, pageSize, totalCount, totalPages}
    - Plain Accept → bare list; hateoas Accept → {"value", "links"} envelope
    - Missing Accept header → 400; unknown company → 404
"""

import json
from uuid import UUID, uuid4

from sqlalchemy import event

HATEOAS = "application/vnd.companyemployees.hateoas+json"


def _pagination(res) -> dict:
    return json.loads(res.headers["x-pagination"])


async def test_list_employees_sorted_by_name_with_pagination_header(
    client, seed_company,
):
    res = await client.get(f"/api/companies/{seed_company.id}/employees")
    assert res.status_code == 200
    assert [e["name"] for e in res.json()] == [
        "Jana McLeaf", "Kane Miller", "Sam Raiden",
    ]
    assert _pagination(res) == {
        "currentPage": 1, "pageSize": 10, "totalCount": 3, "totalPages": 1,
    }


async def test_page_size_and_number_slice_results(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"pageNumber": 2, "pageSize": 2},
    )
    assert [e["name"] for e in res.json()] == ["Sam Raiden"]
    assert _pagination(res)["totalPages"] == 2


async def test_page_beyond_last_is_empty_but_keeps_totals(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"pageNumber": 9, "pageSize": 2},
    )
    assert res.status_code == 200
    assert res.json() == []
    assert _pagination(res) == {
        "currentPage": 9, "pageSize": 2, "totalCount": 3, "totalPages": 2,
    }


async def test_page_size_is_clamped_to_fifty(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees", params={"pageSize": 500},
    )
    assert _pagination(res)["pageSize"] == 50


async def test_zero_and_negative_page_size_clamp_to_one(client, seed_company):
    for page_size in (0, -1):
        res = await client.get(
            f"/api/companies/{seed_company.id}/employees",
            params={"pageSize": page_size},
        )
        assert res.status_code == 200
        assert len(res.json()) == 1
        assert _pagination(res)["pageSize"] == 1


async def test_employee_page_never_loads_whole_company(
    client, seed_company, test_engine,
):
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement.lower())

    event.listen(test_engine.sync_engine, "before_cursor_execute", record)
    try:
        res = await client.get(
            f"/api/companies/{seed_company.id}/employees", params={"pageSize": 1},
        )
    finally:
        event.remove(test_engine.sync_engine, "before_cursor_execute", record)

    assert res.status_code == 200
    employee_reads = [s for s in statements if "from employees" in s]
    assert employee_reads
    assert all("count(" in s or "limit" in s for s in employee_reads)


async def test_age_range_filter(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"minAge": 27, "maxAge": 32},
    )
    assert [e["name"] for e in res.json()] == ["Jana McLeaf"]


async def test_invalid_age_range_is_bad_request(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"minAge": 40, "maxAge": 20},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MAX_AGE_RANGE_BAD_REQUEST"


async def test_search_term_is_case_insensitive(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"searchTerm": "MIL"},
    )
    assert [e["name"] for e in res.json()] == ["Kane Miller"]


async def test_order_by_descending_and_unknown_fields_ignored(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"orderBy": "bogus, age desc"},
    )
    assert [e["age"] for e in res.json()] == [35, 30, 26]


async def test_order_by_id_descending(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"orderBy": "id desc"},
    )
    ids = [UUID(e["id"]) for e in res.json()]
    assert len(ids) == 3
    assert ids == sorted(ids, reverse=True)

    res = await client.get(
        f"/api/companies/{seed_company.id}/employees", params={"orderBy": "id"},
    )
    ids = [UUID(e["id"]) for e in res.json()]
    assert ids == sorted(ids)


async def test_fields_shape_output_and_keep_id(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"fields": "name,AGE"},
    )
    first = res.json()[0]
    assert list(first) == ["id", "name", "age"]


async def test_unknown_shape_field_is_bad_request(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"fields": "bogus"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["context"]["field"] == "bogus"


async def test_hateoas_accept_returns_linked_envelope(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees",
        params={"pageSize": 2},
        headers={"Accept": HATEOAS},
    )
    assert res.status_code == 200
    assert res.headers["content-type"].startswith(HATEOAS)
    body = res.json()
    assert set(body) == {"value", "links"}
    assert len(body["value"]) == 2
    first = body["value"][0]
    assert [link["rel"] for link in first["links"]] == [
        "self", "delete_employee", "update_employee",
    ]
    assert first["links"][0]["href"] == (
        f"http://test/api/companies/{seed_company.id}/employees/{first['id']}"
    )
    assert body["links"] == [{
        "href": f"http://test/api/companies/{seed_company.id}/employees",
        "rel": "self",
        "method": "GET",
    }]


async def test_missing_accept_header_is_bad_request(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees", headers={"Accept": ""},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MEDIA_TYPE_BAD_REQUEST"


async def test_head_returns_pagination_header(client, seed_company):
    res = await client.head(f"/api/companies/{seed_company.id}/employees")
    assert res.status_code == 200
    assert _pagination(res)["totalCount"] == 3


async def test_employees_of_missing_company_is_404(client):
    res = await client.get(f"/api/companies/{uuid4()}/employees")
    assert res.status_code == 404


async def test_get_single_employee(client, seed_company):
    employee = seed_company.employees[0]
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees/{employee.id}",
    )
    assert res.status_code == 200
    assert res.json() == {
        "id": str(employee.id), "name": employee.name,
        "age": employee.age, "position": employee.position,
    }


async def test_get_employee_of_other_company_is_404(client, seed_company):
    res = await client.get(
        f"/api/companies/{seed_company.id}/employees/{uuid4()}",
    )
    assert res.status_code == 404
    assert "Employee with id" in res.json()["error"]["message"]


async def test_create_employee_returns_location(client, seed_company):
    res = await client.post(
        f"/api/companies/{seed_company.id}/employees",
        json={"name": "Mia Stone", "age": 41, "position": "Accountant"},
    )
    assert res.status_code == 201
    created = res.json()
    assert res.headers["location"].endswith(
        f"/api/companies/{seed_company.id}/employees/{created['id']}",
    )


async def test_create_underage_employee_is_unprocessable(client, seed_company):
    res = await client.post(
        f"/api/companies/{seed_company.id}/employees",
        json={"name": "Kid", "age": 12, "position": "Intern"},
    )
    assert res.status_code == 422


async def test_create_employee_for_missing_company_is_404(client):
    res = await client.post(
        f"/api/companies/{uuid4()}/employees",
        json={"name": "Mia Stone", "age": 41, "position": "Accountant"},
    )
    assert res.status_code == 404


async def test_update_employee(client, seed_company):
    employee = seed_company.employees[0]
    url = f"/api/companies/{seed_company.id}/employees/{employee.id}"
    res = await client.put(
        url, json={"name": "Renamed", "age": 50, "position": "Lead"},
    )
    assert res.status_code == 204
    assert (await client.get(url)).json()["name"] == "Renamed"


async def test_delete_employee(client, seed_company):
    employee = seed_company.employees[0]
    url = f"/api/companies/{seed_company.id}/employees/{employee.id}"
    res = await client.delete(url)
    assert res.status_code == 204
    assert (await client.get(url)).status_code == 404
