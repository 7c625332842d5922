"""
Deal resolution service.

Resolves a slug to a deal through the provider chain and loads what the
deal page shows next to it: public documents, the media gallery and the
number of investment requests. The secondary loads never fail the page;
errors are logged and the section renders empty.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import func, select

from ...core.config import settings
from ...models.deal import (
    DealFile,
    DealFileRead,
    DealMedia,
    DealMediaRead,
    DealRead,
    InvestmentRequest,
)
from .providers import (
    DatabaseDealProvider,
    DealProvider,
    DealSource,
    FallbackChain,
    FallbackDealProvider,
    ResolvedDeal,
)

logger = logging.getLogger(__name__)


@dataclass
class InvestmentInterest:
    """Investment request count with its own loading flag."""
    count: int = 0
    loading: bool = False


@dataclass
class DealDetails:
    """Everything the deal page renders for one slug."""
    deal: DealRead
    source: DealSource
    files: List[DealFileRead] = field(default_factory=list)
    media: List[DealMediaRead] = field(default_factory=list)
    investment_requests: InvestmentInterest = field(default_factory=InvestmentInterest)


async def count_investment_requests(db: AsyncSession, deal_id: str) -> int:
    """
    Count investment requests for a deal.

    The ``investment_requests`` table is optional. A missing table or any
    other query error counts as zero requests.

    Args:
        db: Database session.
        deal_id: Deal identifier.

    Returns:
        Non-negative number of requests.
    """
    try:
        result = await db.execute(
            select(func.count(InvestmentRequest.id))
            .where(InvestmentRequest.deal_id == deal_id)
        )
        count = result.scalar_one()
    except SQLAlchemyError as e:
        logger.info(f"Investment requests table not available: {e}")
        await db.rollback()
        return 0

    return max(int(count or 0), 0)


async def fetch_public_files(db: AsyncSession, deal_id: str) -> List[DealFileRead]:
    """Load a deal's non-private documents. Errors yield an empty list."""
    try:
        result = await db.execute(
            select(DealFile)
            .where(DealFile.deal_id == deal_id)
            .where(DealFile.is_private == False)  # noqa: E712
            .order_by(DealFile.created_at)
        )
        files = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching files for deal {deal_id}: {e}")
        await db.rollback()
        return []

    return [DealFileRead.model_validate(f) for f in files if not f.is_private]


async def fetch_media(db: AsyncSession, deal_id: str) -> List[DealMediaRead]:
    """Load a deal's gallery in ascending display order. Errors yield an empty list."""
    try:
        result = await db.execute(
            select(DealMedia)
            .where(DealMedia.deal_id == deal_id)
            .order_by(DealMedia.order.asc(), DealMedia.id)
        )
        media = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching media for deal {deal_id}: {e}")
        await db.rollback()
        return []

    return [DealMediaRead.model_validate(m) for m in media]


def default_providers(db: AsyncSession) -> List[DealProvider]:
    """Database first, then the priority-deal table when enabled."""
    providers: List[DealProvider] = [DatabaseDealProvider(db)]
    if settings.fallback_deals_enabled:
        providers.append(FallbackDealProvider())
    return providers


class DealResolver:
    """
    Resolve deal pages by slug.

    Example:
        resolver = DealResolver(db)
        details = await resolver.resolve("san-diego-multi-family-offering")
        if details is None:
            ...  # not found
    """

    def __init__(self, db: AsyncSession, chain: Optional[DealProvider] = None):
        self.db = db
        self.chain = chain or FallbackChain(default_providers(db))

    async def find(self, slug: Optional[str]) -> Optional[ResolvedDeal]:
        """Primary lookup only; no files, media or interest queries."""
        if not slug:
            return None

        resolved = await self.chain.resolve(slug)
        if resolved is None:
            logger.warning(f"Deal not found for slug '{slug}'")
        return resolved

    async def resolve(self, slug: Optional[str]) -> Optional[DealDetails]:
        """
        Resolve a slug to a deal with its files, media and interest count.

        Args:
            slug: Deal slug from the page URL.

        Returns:
            DealDetails, or None when neither the database nor the fallback
            table knows the slug. No secondary queries run in that case.
        """
        resolved = await self.find(slug)
        if resolved is None:
            return None

        details = DealDetails(
            deal=resolved.deal,
            source=resolved.source,
            files=list(resolved.files),
            media=list(resolved.media),
        )

        if resolved.fetch_details:
            deal_id = resolved.deal.id
            details.files = await fetch_public_files(self.db, deal_id)
            details.media = await fetch_media(self.db, deal_id)
            details.investment_requests = InvestmentInterest(
                count=await count_investment_requests(self.db, deal_id),
            )

        return details
