"""Company Pydantic schemas (request DTOs and response models)."""


from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.employee import EmployeeCreate

class CompanyCreate(CamelModel):
    name: str = Field(min_length=1, max_length=60)
    address: str = Field(min_length=1, max_length=60)
    country: Optional[str] = Field(default=None, max_length=60)
    employees: list[EmployeeCreate] = Field(default_factory=list)

class CompanyUpdate(CompanyCreate):
    """Full replacement (PUT); listed employees are added to the company."""

class CompanyOut(CamelModel):
    id: str
    name: str
    full_address: str
