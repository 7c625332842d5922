"""
Deal providers: sources that can turn a slug into a deal.

The database is the authoritative source. The priority-deal table is a
secondary source consulted only when the database has no match. Both
satisfy the same ``DealProvider`` interface and are tried in order by a
``FallbackChain``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ...models.deal import (
    Deal,
    DealFileRead,
    DealMediaRead,
    DealRead,
    MediaType,
    Syndicator,
    SyndicatorSummary,
)
from .fallback_deals import FALLBACK_DOCUMENTS, PRIORITY_DEALS

logger = logging.getLogger(__name__)


class DealSource(str, Enum):
    """Where a resolved deal came from."""
    DATABASE = "database"
    FALLBACK = "fallback"


@dataclass
class ResolvedDeal:
    """
    A deal produced by one provider.

    Attributes:
        deal: The deal as rendered.
        source: Provider that produced it.
        files: Documents supplied by the provider itself.
        media: Gallery items supplied by the provider itself.
        fetch_details: Whether files, media and interest should still be
            loaded from the database for this deal.
    """
    deal: DealRead
    source: DealSource
    files: List[DealFileRead] = field(default_factory=list)
    media: List[DealMediaRead] = field(default_factory=list)
    fetch_details: bool = False


def slug_to_title(slug: str) -> str:
    """Turn ``san-diego-multi-family-offering`` into ``san diego multi family offering``."""
    return " ".join(slug.split("-"))


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class DealProvider(ABC):
    """Resolves a slug to a deal, or ``None`` when it has no match."""

    name: str = "provider"

    @abstractmethod
    async def resolve(self, slug: str) -> Optional[ResolvedDeal]:
        ...


class DatabaseDealProvider(DealProvider):
    """
    Looks deals up in the marketplace database.

    Matching is a case-insensitive comparison of the de-slugged title with
    ``deals.title``. Exactly one row must match; zero rows, several rows
    and query errors all count as a miss.
    """

    name = "database"

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve(self, slug: str) -> Optional[ResolvedDeal]:
        title = slug_to_title(slug)
        logger.info(f"Fetching deal with title: {title}")

        query = (
            select(Deal, Syndicator)
            .outerjoin(Syndicator, Deal.syndicator_id == Syndicator.id)
            .where(Deal.title.ilike(_escape_like(title), escape="\\"))
        )

        try:
            result = await self.db.execute(query)
            row = result.one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching deal '{slug}': {e}")
            await self.db.rollback()
            return None

        if row is None:
            return None

        deal, syndicator = row
        return ResolvedDeal(
            deal=_to_deal_read(deal, syndicator),
            source=DealSource.DATABASE,
            fetch_details=True,
        )


class FallbackDealProvider(DealProvider):
    """
    Serves deals from a static table by exact slug match.

    Records may carry ``media_urls``, which become an ordered image gallery.
    Documents are looked up by slug in a separate table.
    """

    name = "fallback"

    def __init__(
        self,
        records: Iterable[Dict[str, Any]] = PRIORITY_DEALS,
        documents: Optional[Dict[str, List[Dict[str, Any]]]] = None,
    ):
        self.records = {record["slug"]: record for record in records}
        self.documents = FALLBACK_DOCUMENTS if documents is None else documents

    async def resolve(self, slug: str) -> Optional[ResolvedDeal]:
        record = self.records.get(slug)
        if record is None:
            return None

        now = datetime.now(timezone.utc)
        payload = {
            key: value
            for key, value in record.items()
            if key not in ("media_urls", "syndicator")
        }
        summary = record.get("syndicator")
        deal = DealRead(
            **payload,
            syndicator=SyndicatorSummary(**summary) if summary else None,
            created_at=now,
            updated_at=now,
        )

        media = [
            DealMediaRead(
                id=f"mock-media-{index}",
                deal_id=deal.id,
                type=MediaType.IMAGE,
                url=url,
                title=f"Image {index + 1}",
                description=f"Property image {index + 1}",
                order=index,
            )
            for index, url in enumerate(record.get("media_urls") or [])
        ]

        files = [
            DealFileRead(**document, deal_id=deal.id, created_at=now)
            for document in self.documents.get(slug, [])
        ]

        return ResolvedDeal(
            deal=deal,
            source=DealSource.FALLBACK,
            files=files,
            media=media,
        )


class FallbackChain(DealProvider):
    """Tries each provider in order and adopts the first match."""

    name = "chain"

    def __init__(self, providers: Sequence[DealProvider]):
        self.providers = list(providers)

    async def resolve(self, slug: str) -> Optional[ResolvedDeal]:
        for provider in self.providers:
            resolved = await provider.resolve(slug)
            if resolved is not None:
                return resolved
            logger.warning(f"No '{provider.name}' match for deal slug '{slug}'")
        return None


def _to_deal_read(deal: Deal, syndicator: Optional[Syndicator]) -> DealRead:
    """Convert a deal row and its joined syndicator to the page schema."""
    summary = None
    if syndicator is not None:
        summary = SyndicatorSummary.model_validate(syndicator.model_dump())
    data = deal.model_dump()
    # rows written outside the app may leave the JSON column NULL
    if data.get("investment_highlights") is None:
        data["investment_highlights"] = []
    return DealRead(**data, syndicator=summary)
