"""Generic async repository with canonical ordering and count/slice paging."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import ColumnElement

from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

Criteria = Sequence[ColumnElement[bool]]


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Subclasses set ``model`` and ``ordering`` (the canonical sort key plus a
    unique tiebreaker). Every multi-row read is returned in that order, so
    the same filter always yields the same pages.

    ``count`` and ``slice`` make any repository a paging ``CollectionSource``
    whose predicate is a list of SQL criteria. ``fetch_page`` reads the total
    and the rows of one page in a single SELECT, so both come from the same
    snapshot whatever the driver's transaction handling.
    """

    model: type[ModelT]
    ordering: ClassVar[tuple[Any, ...]] = ()

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self, criteria: Criteria = ()):
        """Return a SELECT of the model filtered by ``criteria``."""
        q = select(self.model)
        for criterion in criteria:
            q = q.where(criterion)
        return q

    def _ordered(self, q):
        return q.order_by(*self.ordering) if self.ordering else q

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def find_all(self) -> list[ModelT]:
        result = await self._session.execute(self._ordered(self._base_query()))
        return list(result.scalars().all())

    async def find_by_condition(self, *criteria: ColumnElement[bool]) -> list[ModelT]:
        result = await self._session.execute(self._ordered(self._base_query(criteria)))
        return list(result.scalars().all())

    async def first_by_condition(self, *criteria: ColumnElement[bool]) -> ModelT | None:
        result = await self._session.execute(self._base_query(criteria))
        return result.scalars().first()

    async def count(self, criteria: Criteria) -> int:
        count_q = select(func.count()).select_from(self._base_query(criteria).subquery())
        return (await self._session.execute(count_q)).scalar_one()

    async def slice(self, criteria: Criteria, offset: int, limit: int) -> list[ModelT]:
        q = self._ordered(self._base_query(criteria)).offset(offset).limit(limit)
        result = await self._session.execute(q)
        return list(result.scalars().all())

    async def fetch_page(
        self, criteria: Criteria, offset: int, limit: int
    ) -> tuple[int, list[ModelT]]:
        """Return (total_count, rows) for one page from a single statement."""
        total = func.count().over().label("total")
        q = (
            self._ordered(self._base_query(criteria).add_columns(total))
            .offset(offset)
            .limit(limit)
        )
        while True:
            rows = (await self._session.execute(q)).all()
            if rows:
                return rows[0].total, [row[0] for row in rows]

            # Past the last row the window has nothing to report on
            total_count = await self.count(criteria)
            if total_count <= offset:
                return total_count, []
            # Rows were added past the offset between the two reads; read again

    # ------------------------------------------------------------------
    # Write (staged on the session; RepositoryManager.save() commits)
    # ------------------------------------------------------------------

    async def create(self, instance: ModelT) -> ModelT:
        self._session.add(instance)
        await self._session.flush()  # populate id / defaults
        return instance

    async def delete(self, instance: ModelT) -> None:
        await self._session.delete(instance)
        await self._session.flush()
