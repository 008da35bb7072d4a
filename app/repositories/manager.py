"""Repository manager — one session, all repositories, one save()."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.company import CompanyRepository
from app.repositories.employee import EmployeeRepository


class RepositoryManager:
    def __init__(self, session: AsyncSession):
        self._session = session
        self._company: CompanyRepository | None = None
        self._employee: EmployeeRepository | None = None

    @property
    def company(self) -> CompanyRepository:
        if self._company is None:
            self._company = CompanyRepository(self._session)
        return self._company

    @property
    def employee(self) -> EmployeeRepository:
        if self._employee is None:
            self._employee = EmployeeRepository(self._session)
        return self._employee

    async def save(self) -> None:
        """Commit pending changes; callers await this before responding."""
        await self._session.commit()
