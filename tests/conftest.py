"""Pytest configuration and shared fixtures for API tests."""

import os
import tempfile
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test DB before app imports so config/engine use it
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'employees_api_test.db'}",
)
os.environ.setdefault("APP_ENV", "test")

from app.db.base import Base, engine
from app.main import app


@pytest_asyncio.fixture
async def clean_db():
    """Recreate all tables so each test starts from an empty database."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    # Pooled connections belong to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def client(clean_db):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def company(client):
    """An existing company without employees; returns its JSON."""
    resp = await client.post(
        "/api/companies",
        json={"name": "Admin Solutions Ltd", "address": "312 Forest Avenue, BF 923", "country": "USA"},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def staffed_company(client):
    """A company with 25 employees named ``Employee 01`` .. ``Employee 25`` (ages 20..44)."""
    employees = [
        {"name": f"Employee {i:02d}", "age": 19 + i, "position": "Developer"}
        for i in range(25, 0, -1)  # inserted out of order on purpose
    ]
    resp = await client.post(
        "/api/companies",
        json={"name": "IT Solutions Ltd", "address": "583 Wall Dr. Gwynn Oak, MD 21207", "country": "USA", "employees": employees},
    )
    assert resp.status_code == 201
    return resp.json()
