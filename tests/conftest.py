"""
Pytest configuration and fixtures.

Root-level fixtures shared across all test modules.
"""

import os
from typing import AsyncGenerator

# Set test environment before the app reads its settings
os.environ["APP_ENV"] = "test"
os.environ["DEBUG"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

from equitymd.main import app
from equitymd.core.database import get_db
from equitymd.core.security import get_password_hash
from equitymd.models.deal import Deal, DealStatus, Syndicator, VerificationStatus
from equitymd.models.user import User


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# === Marker Configuration ===

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "admin: Tests requiring admin authentication")
    config.addinivalue_line("markers", "non_admin: Tests that don't require admin authentication")


# === Core Database Fixtures ===

@pytest_asyncio.fixture
async def test_db() -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(test_db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client."""

    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# === Accounts ===

@pytest_asyncio.fixture
async def admin_user(test_db: AsyncSession) -> User:
    """Create admin user for tests."""
    user = User(
        email="admin@test.com",
        full_name="Test Admin",
        hashed_password=get_password_hash("testpassword"),
        is_admin=True,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest_asyncio.fixture
async def regular_user(test_db: AsyncSession) -> User:
    """Create regular investor user for tests."""
    user = User(
        email="user@test.com",
        full_name="Test User",
        hashed_password=get_password_hash("testpassword"),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_token(client: AsyncClient, admin_user: User) -> str:
    """Get admin auth token."""
    response = await client.post(
        "/api/v1/auth/login",
        data={"username": "admin@test.com", "password": "testpassword"},
    )
    return response.json()["access_token"]


@pytest_asyncio.fixture
async def user_token(client: AsyncClient, regular_user: User) -> str:
    """Get regular user auth token."""
    response = await client.post(
        "/api/v1/auth/login",
        data={"username": "user@test.com", "password": "testpassword"},
    )
    return response.json()["access_token"]


# === Marketplace Data ===

@pytest_asyncio.fixture
async def syndicator(test_db: AsyncSession) -> Syndicator:
    """Create a syndicator pending verification."""
    syndicator = Syndicator(
        id="harbor-capital",
        company_name="Harbor Capital Partners",
        company_logo_url="https://cdn.test/harbor.png",
        years_in_business=12,
        company_description="Value-add multifamily sponsor.",
        website_url="https://harbor.test",
        total_deal_volume=250000000,
        verification_status=VerificationStatus.PENDING,
    )
    test_db.add(syndicator)
    await test_db.commit()
    await test_db.refresh(syndicator)
    return syndicator


@pytest_asyncio.fixture
async def deal(test_db: AsyncSession, syndicator: Syndicator) -> Deal:
    """Create an active deal listed by the syndicator."""
    deal = Deal(
        id="deal-harbor-1",
        syndicator_id=syndicator.id,
        title="Austin Value Add Portfolio",
        slug="austin-value-add-portfolio",
        location="Austin, TX",
        property_type="Multi-Family",
        status=DealStatus.ACTIVE,
        target_irr=18,
        minimum_investment=75000,
        investment_term=4,
        total_equity=8000000,
        description="Three garden-style communities in north Austin.",
        address={"street": "100 Main St", "city": "Austin", "state": "TX", "zip": "78701"},
        investment_highlights=["Below replacement cost", "Renovation upside"],
        featured=True,
    )
    test_db.add(deal)
    await test_db.commit()
    await test_db.refresh(deal)
    return deal
