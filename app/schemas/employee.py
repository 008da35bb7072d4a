"""Employee Pydantic schemas (request DTOs, response model, query parameters)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import Field

from app.core.pagination import QueryParameters
from app.schemas.common import CamelModel


@dataclass(frozen=True)
class EmployeeParameters(QueryParameters):
    """Paging plus the employee filters (age range, name search)."""

    min_age: int = 0
    max_age: Optional[int] = None
    search_term: Optional[str] = None

    @property
    def valid_age_range(self) -> bool:
        return self.max_age is None or self.max_age >= self.min_age


class EmployeeCreate(CamelModel):
    name: str = Field(min_length=1, max_length=30)
    age: int = Field(ge=18)
    position: str = Field(min_length=1, max_length=20)


class EmployeeUpdate(EmployeeCreate):
    """Full replacement (PUT) — same shape as create."""


class EmployeePatch(CamelModel):
    """Partial update (PATCH) — only fields sent by the client are applied."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    age: Optional[int] = Field(default=None, ge=18)
    position: Optional[str] = Field(default=None, min_length=1, max_length=20)


class EmployeeOut(CamelModel):
    id: str
    name: str
    age: int
    position: str
