"""Employee repository — employees are always read through their company."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.sql.expression import ColumnElement

from app.core.pagination import PagedResult, paginate_source
from app.domain.employee import Employee
from app.repositories.base import BaseRepository
from app.schemas.employee import EmployeeParameters


def employee_criteria(
    company_id: str, params: EmployeeParameters
) -> list[ColumnElement[bool]]:
    """SQL filter for one company's employees matching the query parameters."""
    criteria: list[ColumnElement[bool]] = [
        Employee.company_id == company_id,
        Employee.age >= params.min_age,
    ]
    if params.max_age is not None:
        criteria.append(Employee.age <= params.max_age)
    if params.search_term:
        criteria.append(
            func.lower(Employee.name).contains(params.search_term.strip().lower(), autoescape=True)
        )
    return criteria


class EmployeeRepository(BaseRepository[Employee]):
    model = Employee
    ordering = (Employee.name, Employee.id)

    async def get_employees(
        self, company_id: str, params: EmployeeParameters
    ) -> PagedResult[Employee]:
        return await paginate_source(self, employee_criteria(company_id, params), params)

    async def get_employee(self, company_id: str, employee_id: str) -> Employee | None:
        return await self.first_by_condition(
            Employee.company_id == company_id, Employee.id == employee_id
        )

    async def create_employee_for_company(self, company_id: str, employee: Employee) -> Employee:
        employee.company_id = company_id
        return await self.create(employee)

    async def delete_employee(self, employee: Employee) -> None:
        await self.delete(employee)
