"""Employee router — nested under a company.

The list endpoint is paged: the body is a plain array and the page metadata
is sent in the ``X-Pagination`` header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.response import paged_response
from app.db.base import get_db
from app.schemas.employee import (
    EmployeeCreate,
    EmployeeOut,
    EmployeeParameters,
    EmployeePatch,
    EmployeeUpdate,
)
from app.schemas.mapping import to_employee_out
from app.services.employee import EmployeeService

router = APIRouter(prefix="/companies/{company_id}/employees", tags=["Employees"])


def _svc(session: AsyncSession) -> EmployeeService:
    return EmployeeService(session)


def employee_parameters(
    page_number: Optional[str] = Query(default=None, alias="pageNumber", description="Page number (1-based)"),
    page_size: Optional[str] = Query(default=None, alias="pageSize", description="Items per page (clamped to the maximum)"),
    min_age: int = Query(default=0, ge=0, alias="minAge"),
    max_age: Optional[int] = Query(default=None, ge=0, alias="maxAge"),
    search_term: Optional[str] = Query(default=None, alias="searchTerm", max_length=30),
) -> EmployeeParameters:
    """FastAPI dependency for ``?pageNumber=1&pageSize=10&minAge=..&maxAge=..&searchTerm=..``.

    Page values are taken as raw strings so malformed input is normalized
    instead of rejected.
    """
    return EmployeeParameters.normalize(
        page_number,
        page_size,
        min_age=min_age,
        max_age=max_age,
        search_term=search_term,
    )


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=list[EmployeeOut])
async def list_employees(
    company_id: str,
    request: Request,
    params: EmployeeParameters = Depends(employee_parameters),
    session: AsyncSession = Depends(get_db),
):
    """List a company's employees ordered by name (paged, JSON or CSV)."""
    page = await _svc(session).list_employees(company_id, params)
    return paged_response(request, page, to_employee_out, EmployeeOut)


@router.get("/{employee_id}", response_model=EmployeeOut)
async def get_employee(
    company_id: str,
    employee_id: str,
    session: AsyncSession = Depends(get_db),
):
    employee = await _svc(session).get_employee(company_id, employee_id)
    return to_employee_out(employee)


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def create_employee(
    company_id: str,
    body: EmployeeCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    employee = await _svc(session).create_employee(company_id, body)
    response.headers["Location"] = str(
        request.url_for("get_employee", company_id=company_id, employee_id=employee.id)
    )
    return to_employee_out(employee)


@router.put("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_employee(
    company_id: str,
    employee_id: str,
    body: EmployeeUpdate,
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).update_employee(company_id, employee_id, body)


@router.patch("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_employee(
    company_id: str,
    employee_id: str,
    body: EmployeePatch,
    session: AsyncSession = Depends(get_db),
):
    """Apply only the fields present in the body."""
    await _svc(session).update_employee(company_id, employee_id, body)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    company_id: str,
    employee_id: str,
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).delete_employee(company_id, employee_id)
