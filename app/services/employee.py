"""Employee service — employees are always addressed through their company.

Every operation checks the parent company first, so a missing company is a
404 and never an empty page.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestError, NotFoundError
from app.core.pagination import PagedResult
from app.domain.employee import Employee
from app.repositories.manager import RepositoryManager
from app.schemas.employee import EmployeeCreate, EmployeeParameters, EmployeePatch, EmployeeUpdate
from app.schemas.mapping import apply_employee_update, to_employee_entity

logger = logging.getLogger(__name__)

class EmployeeService:
    def __init__(self, session: AsyncSession):
        self._repo = RepositoryManager(session)

    async def _ensure_company(self, company_id: str) -> None:
        if not await self._repo.company.get_company(company_id):
            logger.info("Company with id: %s doesn't exist in the database", company_id)
            raise NotFoundError("Company", company_id)

    async def list_employees(
        self, company_id: str, params: EmployeeParameters
    ) -> PagedResult[Employee]:
        if not params.valid_age_range:
            logger.warning("Invalid age range: min=%s max=%s", params.min_age, params.max_age)
            raise BadRequestError("Max age can't be less than min age.")
        await self._ensure_company(company_id)
        page = await self._repo.employee.get_employees(company_id, params)
        logger.debug(
            "Employees page %d/%d for company %s (%d items)",
            page.metadata.current_page, page.metadata.total_pages, company_id, len(page),
        )
        return page

    async def get_employee(self, company_id: str, employee_id: str) -> Employee:
        await self._ensure_company(company_id)
        employee = await self._repo.employee.get_employee(company_id, employee_id)
        if not employee:
            logger.info("Employee with id: %s doesn't exist in the database", employee_id)
            raise NotFoundError("Employee", employee_id)
        return employee

    async def create_employee(self, company_id: str, data: EmployeeCreate) -> Employee:
        await self._ensure_company(company_id)
        employee = await self._repo.employee.create_employee_for_company(
            company_id, to_employee_entity(data)
        )
        await self._repo.save()
        return employee

    async def update_employee(
        self, company_id: str, employee_id: str, data: EmployeeUpdate | EmployeePatch
    ) -> None:
        """Apply a full (PUT) or partial (PATCH) update."""
        employee = await self.get_employee(company_id, employee_id)
        apply_employee_update(data, employee)
        await self._repo.save()

    async def delete_employee(self, company_id: str, employee_id: str) -> None:
        employee = await self.get_employee(company_id, employee_id)
        await self._repo.employee.delete_employee(employee)
        await self._repo.save()
