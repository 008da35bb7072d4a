"""Company repository."""

from collections.abc import Iterable

from app.domain.company import Company
from app.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    model = Company
    ordering = (Company.name, Company.id)

    async def get_all_companies(self) -> list[Company]:
        return await self.find_all()

    async def get_company(self, company_id: str) -> Company | None:
        return await self.first_by_condition(Company.id == company_id)

    async def get_by_ids(self, ids: Iterable[str]) -> list[Company]:
        return await self.find_by_condition(Company.id.in_(list(ids)))

    async def create_company(self, company: Company) -> Company:
        return await self.create(company)

    async def delete_company(self, company: Company) -> None:
        await self.delete(company)
