"""Tests for employees API: paged listing with X-Pagination, filters, CRUD."""

import json

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.db.base import async_session_factory
from app.domain.employee import Employee


def _meta(resp) -> dict:
    return json.loads(resp.headers["x-pagination"])


def _url(company: dict) -> str:
    return f"/api/companies/{company['id']}/employees"


# ---------------------------------------------------------------------------
# Paged listing
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_first_page(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company), params={"pageNumber": 1, "pageSize": 10})
    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body, list)
    assert [e["name"] for e in body] == [f"Employee {i:02d}" for i in range(1, 11)]
    assert _meta(resp) == {"CurrentPage": 1, "PageSize": 10, "TotalCount": 25, "TotalPages": 3}


@pytest.mark.asyncio
async def test_last_page_holds_remainder(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company), params={"pageNumber": 3, "pageSize": 10})
    assert [e["name"] for e in resp.json()] == [f"Employee {i:02d}" for i in range(21, 26)]
    assert _meta(resp)["TotalPages"] == 3


@pytest.mark.asyncio
async def test_page_beyond_last_is_empty(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company), params={"pageNumber": 4, "pageSize": 10})
    assert resp.status_code == 200
    assert resp.json() == []
    assert _meta(resp) == {"CurrentPage": 4, "PageSize": 10, "TotalCount": 25, "TotalPages": 3}


@pytest.mark.asyncio
async def test_defaults_without_query(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company))
    assert len(resp.json()) == 10
    assert _meta(resp)["CurrentPage"] == 1
    assert _meta(resp)["PageSize"] == 10


@pytest.mark.asyncio
async def test_huge_page_size_is_clamped(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company), params={"pageSize": 10000})
    assert resp.status_code == 200
    assert len(resp.json()) == 25
    assert _meta(resp)["PageSize"] == 50
    assert _meta(resp)["TotalPages"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("page_number", ["0", "-3", "abc"])
async def test_bad_page_number_returns_first_page(
    client: AsyncClient, staffed_company: dict, page_number: str
):
    resp = await client.get(_url(staffed_company), params={"pageNumber": page_number, "pageSize": 5})
    assert resp.status_code == 200
    assert resp.json()[0]["name"] == "Employee 01"
    assert _meta(resp)["CurrentPage"] == 1


@pytest.mark.asyncio
async def test_company_without_employees(client: AsyncClient, company: dict):
    resp = await client.get(_url(company), params={"pageNumber": 2})
    assert resp.status_code == 200
    assert resp.json() == []
    assert _meta(resp) == {"CurrentPage": 2, "PageSize": 10, "TotalCount": 0, "TotalPages": 0}


@pytest.mark.asyncio
async def test_missing_company_is_404_not_empty_page(client: AsyncClient):
    resp = await client.get("/api/companies/missing/employees")
    assert resp.status_code == 404
    assert "x-pagination" not in resp.headers


@pytest.mark.asyncio
async def test_repeated_requests_are_identical(client: AsyncClient, staffed_company: dict):
    params = {"pageNumber": 2, "pageSize": 7}
    first = await client.get(_url(staffed_company), params=params)
    second = await client.get(_url(staffed_company), params=params)
    assert first.json() == second.json()
    assert first.headers["x-pagination"] == second.headers["x-pagination"]


@pytest.mark.asyncio
async def test_age_filter(client: AsyncClient, staffed_company: dict):
    # ages are 19 + index: Employee 06 is 25, Employee 11 is 30
    resp = await client.get(
        _url(staffed_company), params={"minAge": 25, "maxAge": 30, "pageSize": 50}
    )
    assert [e["name"] for e in resp.json()] == [f"Employee {i:02d}" for i in range(6, 12)]
    assert _meta(resp)["TotalCount"] == 6


@pytest.mark.asyncio
async def test_invalid_age_range(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company), params={"minAge": 40, "maxAge": 30})
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Max age can't be less than min age."


@pytest.mark.asyncio
async def test_search_term(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company), params={"searchTerm": "EE 2"})
    assert [e["name"] for e in resp.json()] == [f"Employee {i:02d}" for i in range(20, 26)]


@pytest.mark.asyncio
async def test_list_as_csv_keeps_header(client: AsyncClient, staffed_company: dict):
    resp = await client.get(
        _url(staffed_company), params={"pageSize": 2}, headers={"Accept": "text/csv"}
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    lines = resp.text.splitlines()
    assert lines[0] == "id,name,age,position"
    assert len(lines) == 3
    assert _meta(resp)["TotalCount"] == 25


@pytest.mark.asyncio
async def test_list_not_acceptable(client: AsyncClient, staffed_company: dict):
    resp = await client.get(_url(staffed_company), headers={"Accept": "application/xml"})
    assert resp.status_code == 406


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_and_get_employee(client: AsyncClient, company: dict):
    resp = await client.post(
        _url(company), json={"name": "Sam Raiden", "age": 26, "position": "Developer"}
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["name"] == "Sam Raiden"
    assert resp.headers["location"].endswith(f"{_url(company)}/{created['id']}")

    fetched = await client.get(f"{_url(company)}/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


@pytest.mark.asyncio
async def test_create_employee_invalid_body(client: AsyncClient, company: dict):
    resp = await client.post(_url(company), json={"name": "Kid", "age": 12, "position": "Intern"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_create_employee_for_missing_company(client: AsyncClient):
    resp = await client.post(
        "/api/companies/missing/employees",
        json={"name": "Sam Raiden", "age": 26, "position": "Developer"},
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_get_employee_of_another_company(client: AsyncClient, company: dict, staffed_company: dict):
    listed = await client.get(_url(staffed_company), params={"pageSize": 1})
    employee_id = listed.json()[0]["id"]
    resp = await client.get(f"{_url(company)}/{employee_id}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_employee(client: AsyncClient, company: dict):
    created = (await client.post(
        _url(company), json={"name": "Sam Raiden", "age": 26, "position": "Developer"}
    )).json()
    resp = await client.put(
        f"{_url(company)}/{created['id']}",
        json={"name": "Sam Raiden", "age": 27, "position": "Lead Developer"},
    )
    assert resp.status_code == 204
    fetched = (await client.get(f"{_url(company)}/{created['id']}")).json()
    assert (fetched["age"], fetched["position"]) == (27, "Lead Developer")


@pytest.mark.asyncio
async def test_patch_employee_changes_only_sent_fields(client: AsyncClient, company: dict):
    created = (await client.post(
        _url(company), json={"name": "Jana McLeaf", "age": 30, "position": "Manager"}
    )).json()
    resp = await client.patch(f"{_url(company)}/{created['id']}", json={"age": 31})
    assert resp.status_code == 204
    fetched = (await client.get(f"{_url(company)}/{created['id']}")).json()
    assert fetched == {**created, "age": 31}


@pytest.mark.asyncio
async def test_patch_missing_employee(client: AsyncClient, company: dict):
    resp = await client.patch(f"{_url(company)}/missing", json={"age": 31})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_employee(client: AsyncClient, company: dict):
    created = (await client.post(
        _url(company), json={"name": "Kane Miller", "age": 35, "position": "Administrator"}
    )).json()
    resp = await client.delete(f"{_url(company)}/{created['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"{_url(company)}/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_deleting_company_deletes_its_employees(client: AsyncClient, staffed_company: dict):
    resp = await client.delete(f"/api/companies/{staffed_company['id']}")
    assert resp.status_code == 204

    async with async_session_factory() as session:
        remaining = (await session.execute(
            select(func.count()).select_from(Employee).where(Employee.company_id == staffed_company["id"])
        )).scalar_one()
    assert remaining == 0
