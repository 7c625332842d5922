"""
Priority deal migration tests.
"""

from datetime import timezone

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import func, select

from equitymd.models.deal import Deal, DealFile, InvestmentRequest, Syndicator
from equitymd.models.user import User
from equitymd.services.deals.fallback_deals import PRIORITY_DEALS
from equitymd.services.deals.seed import seed_priority_deals


@pytest.mark.asyncio
async def test_seed_then_serve_from_database(client: AsyncClient, test_db: AsyncSession):
    """
    Expected: after seeding, priority deals are served from the database.
    """
    assert await seed_priority_deals(test_db) == len(PRIORITY_DEALS)

    res = await client.get("/api/v1/deals/multifamily-adu-opportunity")
    data = res.json()
    assert data["source"] == "database"
    assert [f["file_type"] for f in data["files"]] == ["PDF"]
    assert data["deal"]["syndicator"]["company_name"] == "Starboard Realty"

    res = await client.get("/api/v1/deals/greenville-apartment-complex")
    assert [m["order"] for m in res.json()["media"]] == list(range(7))


@pytest.mark.asyncio
async def test_seed_is_idempotent(test_db: AsyncSession):
    await seed_priority_deals(test_db)

    assert await seed_priority_deals(test_db) == 0

    deals = (await test_db.execute(select(func.count()).select_from(Deal))).scalar_one()
    syndicators = (await test_db.execute(select(func.count()).select_from(Syndicator))).scalar_one()
    assert deals == len(PRIORITY_DEALS)
    assert syndicators == 3


def test_timestamp_defaults_are_timezone_aware():
    """
    Expected: new rows are stamped in aware UTC so timezone-strict stores accept them.
    """
    rows = [
        User(email="tz@test.com", hashed_password="x"),
        Syndicator(company_name="Harbor Capital Partners"),
        Deal(title="Austin Value Add Portfolio"),
        DealFile(deal_id="d", file_name="OM", file_type="PDF", file_url="https://cdn.test/om.pdf"),
        InvestmentRequest(deal_id="d"),
    ]

    for row in rows:
        assert row.created_at.tzinfo is timezone.utc
    assert rows[0].updated_at.tzinfo is timezone.utc
    assert rows[2].updated_at.tzinfo is timezone.utc
