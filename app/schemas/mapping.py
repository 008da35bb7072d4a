"""Mapping between ORM entities and transfer models."""

from __future__ import annotations

from app.domain.company import Company
from app.domain.employee import Employee
from app.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeePatch, EmployeeUpdate


def to_company_out(company: Company) -> CompanyOut:
    full_address = " ".join(part for part in (company.address, company.country) if part)
    return CompanyOut(id=company.id, name=company.name, full_address=full_address)


def to_employee_out(employee: Employee) -> EmployeeOut:
    return EmployeeOut.model_validate(employee)


def to_employee_entity(data: EmployeeCreate) -> Employee:
    return Employee(name=data.name, age=data.age, position=data.position)


def to_company_entity(data: CompanyCreate) -> Company:
    return Company(
        name=data.name,
        address=data.address,
        country=data.country,
        employees=[to_employee_entity(e) for e in data.employees],
    )


def apply_company_update(data: CompanyUpdate, company: Company) -> list[Employee]:
    """Copy scalar fields onto ``company``; return the new employees to create."""
    company.name = data.name
    company.address = data.address
    company.country = data.country
    return [to_employee_entity(e) for e in data.employees]


def apply_employee_update(data: EmployeeUpdate | EmployeePatch, employee: Employee) -> None:
    """Copy the fields the client sent onto ``employee``."""
    for field_name, value in data.model_dump(exclude_none=True, exclude_unset=True).items():
        setattr(employee, field_name, value)
