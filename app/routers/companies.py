"""Company CRUD router, including the bulk collection endpoints.

Routers only handle HTTP (request parsing, response shaping); all business
logic delegates to app/services/.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.formatters import render_collection
from app.db.base import get_db
from app.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate
from app.schemas.mapping import to_company_out
from app.services.company import CompanyService

router = APIRouter(prefix="/companies", tags=["Companies"])


def _svc(session: AsyncSession) -> CompanyService:
    return CompanyService(session)


def _parse_ids(raw: str) -> list[str]:
    """``"(a, b,c)"`` body of the collection route -> ``["a", "b", "c"]``."""
    return [part.strip() for part in raw.split(",") if part.strip()]


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=list[CompanyOut])
async def list_companies(
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    """List all companies ordered by name (JSON or CSV)."""
    companies = await _svc(session).list_companies()
    return render_collection(request, [to_company_out(c) for c in companies], CompanyOut)


@router.get("/collection/({ids})", response_model=list[CompanyOut])
async def get_company_collection(
    ids: str,
    session: AsyncSession = Depends(get_db),
):
    """Fetch several companies by a comma-separated id list."""
    companies = await _svc(session).get_companies_by_ids(_parse_ids(ids))
    return [to_company_out(c) for c in companies]


@router.post("/collection", response_model=list[CompanyOut], status_code=status.HTTP_201_CREATED)
async def create_company_collection(
    body: list[CompanyCreate],
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    companies = await _svc(session).create_company_collection(body)
    ids = ",".join(c.id for c in companies)
    response.headers["Location"] = str(request.url_for("get_company_collection", ids=ids))
    return [to_company_out(c) for c in companies]


@router.post("", response_model=CompanyOut, status_code=status.HTTP_201_CREATED)
async def create_company(
    body: CompanyCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    """Create a company, optionally with its first employees."""
    company = await _svc(session).create_company(body)
    response.headers["Location"] = str(request.url_for("get_company", company_id=company.id))
    return to_company_out(company)


@router.get("/{company_id}", response_model=CompanyOut)
async def get_company(
    company_id: str,
    session: AsyncSession = Depends(get_db),
):
    company = await _svc(session).get_company(company_id)
    return to_company_out(company)


@router.put("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_company(
    company_id: str,
    body: CompanyUpdate,
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).update_company(company_id, body)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Delete a company together with its employees."""
    await _svc(session).delete_company(company_id)
