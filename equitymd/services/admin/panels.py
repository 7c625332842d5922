"""
Data loaders for admin dashboard panels.

Each loader takes the request's database session and returns the payload
its panel renders. Panels whose workflows live entirely in the client
(imports, credits, claims) have no loader.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import func, select

from ...models.deal import (
    Deal,
    DealFile,
    DealMedia,
    DealStatus,
    InvestmentRequest,
    Syndicator,
    VerificationStatus,
)
from ...models.user import User, UserRead

logger = logging.getLogger(__name__)

PANEL_LIST_LIMIT = 100


async def _count(db: AsyncSession, model, *conditions) -> int:
    query = select(func.count()).select_from(model)
    for condition in conditions:
        query = query.where(condition)
    result = await db.execute(query)
    return int(result.scalar_one() or 0)


def _user_rows(users) -> List[Dict[str, Any]]:
    return [UserRead.model_validate(u).model_dump(mode="json") for u in users]


async def load_analytics(db: AsyncSession) -> Dict[str, Any]:
    """Marketplace totals."""
    total_requests = await _count_requests(db)
    return {
        "total_users": await _count(db, User),
        "active_users": await _count(db, User, User.is_active == True),  # noqa: E712
        "total_deals": await _count(db, Deal),
        "active_deals": await _count(db, Deal, Deal.status == DealStatus.ACTIVE),
        "total_syndicators": await _count(db, Syndicator),
        "investment_requests": total_requests,
    }


async def _count_requests(db: AsyncSession) -> int:
    # investment_requests may not exist yet
    try:
        return await _count(db, InvestmentRequest)
    except SQLAlchemyError as e:
        logger.info(f"Investment requests table not available: {e}")
        await db.rollback()
        return 0


async def load_users(db: AsyncSession) -> Dict[str, Any]:
    result = await db.execute(
        select(User)
        .where(User.is_active == True)  # noqa: E712
        .order_by(User.created_at.desc())
        .limit(PANEL_LIST_LIMIT)
    )
    return {"users": _user_rows(result.scalars().all())}


async def load_deactivated(db: AsyncSession) -> Dict[str, Any]:
    result = await db.execute(
        select(User)
        .where(User.is_active == False)  # noqa: E712
        .order_by(User.updated_at.desc())
        .limit(PANEL_LIST_LIMIT)
    )
    return {"users": _user_rows(result.scalars().all())}


async def _requests_per_deal(db: AsyncSession) -> Dict[str, int]:
    try:
        result = await db.execute(
            select(InvestmentRequest.deal_id, func.count(InvestmentRequest.id))
            .group_by(InvestmentRequest.deal_id)
        )
        return {deal_id: int(count) for deal_id, count in result.all()}
    except SQLAlchemyError as e:
        logger.info(f"Investment requests table not available: {e}")
        await db.rollback()
        return {}


async def load_properties(db: AsyncSession) -> Dict[str, Any]:
    """Deals, newest first, with their interest counts."""
    result = await db.execute(
        select(Deal).order_by(Deal.created_at.desc()).limit(PANEL_LIST_LIMIT)
    )
    # plain rows: a failed count rolls back and expires loaded deals
    deals = [
        {
            "id": deal.id,
            "title": deal.title,
            "slug": deal.slug,
            "status": deal.status.value,
            "featured": deal.featured,
            "syndicator_id": deal.syndicator_id,
        }
        for deal in result.scalars().all()
    ]
    counts = await _requests_per_deal(db)
    for row in deals:
        row["investment_requests"] = counts.get(row["id"], 0)
    return {"deals": deals}


async def load_verification(db: AsyncSession) -> Dict[str, Any]:
    """Syndicators waiting for verification review."""
    result = await db.execute(
        select(Syndicator)
        .where(Syndicator.verification_status == VerificationStatus.PENDING)
        .order_by(Syndicator.created_at)
    )
    return {
        "pending": [
            {
                "id": s.id,
                "company_name": s.company_name,
                "website_url": s.website_url,
                "years_in_business": s.years_in_business,
            }
            for s in result.scalars().all()
        ]
    }


async def load_settings(db: AsyncSession) -> Dict[str, Any]:
    """Syndicator logos for the logo manager."""
    result = await db.execute(select(Syndicator).order_by(Syndicator.company_name))
    return {
        "logos": [
            {"syndicator_id": s.id, "company_name": s.company_name, "logo_url": s.company_logo_url}
            for s in result.scalars().all()
        ]
    }


async def load_system(db: AsyncSession) -> Dict[str, Any]:
    """Row counts per marketplace table."""
    tables = {}
    for model in (User, Syndicator, Deal, DealFile, DealMedia):
        tables[model.__tablename__] = await _count(db, model)
    tables[InvestmentRequest.__tablename__] = await _count_requests(db)
    return {"tables": tables}
