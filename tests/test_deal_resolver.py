"""
Deal resolver tests (providers, fallback chain, secondary fetches).
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from equitymd.models.deal import Deal, DealFile, DealMedia, InvestmentRequest
from equitymd.services.deals import (
    DatabaseDealProvider,
    DealResolver,
    DealSource,
    FallbackChain,
    FallbackDealProvider,
    count_investment_requests,
    slug_to_title,
)
from equitymd.services.deals.fallback_deals import PRIORITY_DEALS


def _failing_session() -> AsyncMock:
    """Session whose every query fails like an unreachable database."""
    db = AsyncMock(spec=AsyncSession)
    db.execute.side_effect = OperationalError(
        "SELECT", {}, Exception("could not connect to server")
    )
    return db


def _empty_session() -> AsyncMock:
    """Session whose deal lookup finds nothing."""
    db = AsyncMock(spec=AsyncSession)
    result = MagicMock()
    result.one_or_none.return_value = None
    db.execute.return_value = result
    return db


def test_slug_to_title():
    assert slug_to_title("san-diego-multi-family-offering") == "san diego multi family offering"
    assert slug_to_title("single") == "single"


@pytest.mark.asyncio
@pytest.mark.parametrize("record", PRIORITY_DEALS, ids=lambda r: r["slug"])
async def test_every_priority_deal_survives_database_failure(record):
    """
    Expected: each priority slug resolves from the fallback table when the store fails.
    """
    db = _failing_session()

    details = await DealResolver(db).resolve(record["slug"])

    assert details is not None
    assert details.source == DealSource.FALLBACK
    assert details.deal.id == record["id"]
    assert details.investment_requests.count == 0
    # only the primary lookup touched the store
    assert db.execute.await_count == 1


@pytest.mark.asyncio
async def test_san_diego_fallback_record():
    details = await DealResolver(_failing_session()).resolve("san-diego-multi-family-offering")

    assert details.deal.investment_term == 5
    assert details.deal.target_irr == 15
    assert details.files == []
    assert details.media == []


@pytest.mark.asyncio
async def test_adu_fallback_has_one_pdf():
    details = await DealResolver(_failing_session()).resolve("multifamily-adu-opportunity")

    assert len(details.files) == 1
    assert details.files[0].file_type == "PDF"
    assert details.files[0].is_private is False


@pytest.mark.asyncio
async def test_unknown_slug_with_failing_store_issues_no_secondary_fetches():
    """
    Failure: unknown slug ends resolution after the single lookup query.
    """
    db = _failing_session()

    assert await DealResolver(db).resolve("nowhere-tower") is None
    assert db.execute.await_count == 1


@pytest.mark.asyncio
async def test_unknown_slug_with_empty_store_issues_no_secondary_fetches():
    db = _empty_session()

    assert await DealResolver(db).resolve("nowhere-tower") is None
    assert db.execute.await_count == 1
    db.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_slug_short_circuits():
    """
    Edge: empty slug returns no deal without querying.
    """
    db = _empty_session()

    assert await DealResolver(db).resolve("") is None
    assert await DealResolver(db).resolve(None) is None
    db.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_count_error_yields_zero_and_rolls_back():
    db = _failing_session()

    assert await count_investment_requests(db, "deal-1") == 0
    db.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_fallback_media_synthesized_in_order():
    provider = FallbackDealProvider()

    resolved = await provider.resolve("greenville-apartment-complex")

    assert [m.order for m in resolved.media] == list(range(7))
    assert resolved.media[0].id == "mock-media-0"
    assert resolved.media[6].title == "Image 7"
    assert resolved.media[6].description == "Property image 7"
    assert resolved.fetch_details is False


@pytest.mark.asyncio
async def test_fallback_requires_exact_slug():
    provider = FallbackDealProvider()

    assert await provider.resolve("San-Diego-Multi-Family-Offering") is None
    assert await provider.resolve("san-diego") is None


@pytest.mark.asyncio
async def test_injected_fallback_records():
    """
    Expected: the chain serves whatever records the fallback provider is given.
    """
    records = [{
        "id": "custom-1",
        "title": "Phoenix Storage Fund",
        "slug": "phoenix-storage-fund",
        "status": "active",
        "target_irr": 12,
        "media_urls": ["https://cdn.test/p1.jpg"],
    }]
    chain = FallbackChain([
        DatabaseDealProvider(_failing_session()),
        FallbackDealProvider(records=records, documents={}),
    ])

    details = await DealResolver(_failing_session(), chain=chain).resolve("phoenix-storage-fund")

    assert details.deal.title == "Phoenix Storage Fund"
    assert details.deal.syndicator is None
    assert len(details.media) == 1
    assert await chain.resolve("san-diego-multi-family-offering") is None


# === Against a real database ===

@pytest.mark.asyncio
async def test_title_match_is_case_insensitive(test_db: AsyncSession, deal: Deal):
    resolved = await DatabaseDealProvider(test_db).resolve("AUSTIN-value-ADD-portfolio")

    assert resolved is not None
    assert resolved.deal.id == deal.id
    assert resolved.fetch_details is True


@pytest.mark.asyncio
async def test_ambiguous_title_is_a_miss(test_db: AsyncSession):
    """
    Edge: two deals matching the same title count as no match.
    """
    test_db.add_all([
        Deal(id="twin-1", title="Twin Towers"),
        Deal(id="twin-2", title="TWIN TOWERS"),
    ])
    await test_db.commit()

    assert await DealResolver(test_db).resolve("twin-towers") is None


@pytest.mark.asyncio
async def test_like_wildcards_in_slug_are_literal(test_db: AsyncSession):
    test_db.add(Deal(id="lot-9", title="Lot 9 Retail"))
    await test_db.commit()

    assert await DatabaseDealProvider(test_db).resolve("lot-_-retail") is None
    assert await DatabaseDealProvider(test_db).resolve("lot-%") is None
    assert await DatabaseDealProvider(test_db).resolve("lot-9-retail") is not None


async def _add_files_media_and_requests(test_db: AsyncSession, deal: Deal) -> None:
    test_db.add_all([
        DealFile(
            id="file-om",
            deal_id=deal.id,
            file_name="Offering Memorandum",
            file_type="PDF",
            file_url="https://cdn.test/om.pdf",
        ),
        DealMedia(id="media-2", deal_id=deal.id, url="https://cdn.test/2.jpg", order=1),
        DealMedia(id="media-1", deal_id=deal.id, url="https://cdn.test/1.jpg", order=0),
        InvestmentRequest(deal_id=deal.id),
        InvestmentRequest(deal_id=deal.id),
    ])
    await test_db.commit()


@pytest.mark.asyncio
async def test_files_error_keeps_deal_media_and_count(test_db: AsyncSession, deal: Deal):
    """
    Failure: a broken files query leaves only the documents section empty.
    """
    await _add_files_media_and_requests(test_db, deal)
    await test_db.execute(text("DROP TABLE deal_files"))
    await test_db.commit()

    details = await DealResolver(test_db).resolve("austin-value-add-portfolio")

    assert details is not None
    assert details.deal.id == deal.id
    assert details.files == []
    assert [m.id for m in details.media] == ["media-1", "media-2"]
    assert details.investment_requests.count == 2


@pytest.mark.asyncio
async def test_media_error_keeps_deal_files_and_count(test_db: AsyncSession, deal: Deal):
    """
    Failure: a broken media query leaves only the gallery empty.
    """
    await _add_files_media_and_requests(test_db, deal)
    await test_db.execute(text("DROP TABLE deal_media"))
    await test_db.commit()

    details = await DealResolver(test_db).resolve("austin-value-add-portfolio")

    assert details is not None
    assert details.deal.id == deal.id
    assert [f.id for f in details.files] == ["file-om"]
    assert details.media == []
    assert details.investment_requests.count == 2
