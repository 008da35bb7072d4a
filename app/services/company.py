"""Company service — business rules for the company resource.

Rule: No FastAPI here. Every mutation awaits ``save()`` before returning.
"""


import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestError, NotFoundError
from app.domain.company import Company
from app.repositories.manager import RepositoryManager
from app.schemas.company import CompanyCreate, CompanyUpdate
from app.schemas.mapping import apply_company_update, to_company_entity

logger = logging.getLogger(__name__)

class CompanyService:
    def __init__(self, session: AsyncSession):
        self._repo = RepositoryManager(session)

    async def list_companies(self) -> list[Company]:
        return await self._repo.company.get_all_companies()

    async def get_company(self, company_id: str) -> Company:
        company = await self._repo.company.get_company(company_id)
        if not company:
            logger.info("Company with id: %s doesn't exist in the database", company_id)
            raise NotFoundError("Company", company_id)
        return company

    async def get_companies_by_ids(self, ids: Sequence[str]) -> list[Company]:
        if not ids:
            logger.warning("Parameter ids is empty")
            raise BadRequestError("Parameter ids is empty")
        unique_ids = list(dict.fromkeys(ids))
        companies = await self._repo.company.get_by_ids(unique_ids)
        if len(companies) != len(unique_ids):
            logger.info("Some ids are not valid in a collection: %s", ",".join(unique_ids))
            raise NotFoundError("Company collection")
        return companies

    async def create_company(self, data: CompanyCreate) -> Company:
        company = await self._repo.company.create_company(to_company_entity(data))
        await self._repo.save()
        logger.info("Created company %s", company.id)
        return company

    async def create_company_collection(self, data: Sequence[CompanyCreate]) -> list[Company]:
        if not data:
            logger.warning("Company collection sent from client is empty")
            raise BadRequestError("Company collection is empty")
        companies = [
            await self._repo.company.create_company(to_company_entity(item)) for item in data
        ]
        await self._repo.save()
        logger.info("Created %d companies", len(companies))
        return companies

    async def update_company(self, company_id: str, data: CompanyUpdate) -> None:
        company = await self.get_company(company_id)
        for employee in apply_company_update(data, company):
            await self._repo.employee.create_employee_for_company(company.id, employee)
        await self._repo.save()

    async def delete_company(self, company_id: str) -> None:
        company = await self.get_company(company_id)
        await self._repo.company.delete_company(company)
        await self._repo.save()
        logger.info("Deleted company %s", company_id)
