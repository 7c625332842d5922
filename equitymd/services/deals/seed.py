"""
Copy the priority deals into the marketplace database.

Once a priority deal is stored, deal pages serve it from the database and
the fallback table is no longer consulted for that slug.
"""

import logging
from typing import Any, Dict, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from ...models.deal import Deal, DealFile, DealMedia, DealStatus, MediaType, Syndicator, VerificationStatus
from .fallback_deals import FALLBACK_DOCUMENTS, PRIORITY_DEALS

logger = logging.getLogger(__name__)


async def seed_priority_deals(
    db: AsyncSession,
    records: Iterable[Dict[str, Any]] = PRIORITY_DEALS,
) -> int:
    """
    Insert priority deals with their syndicators, gallery and documents.

    Deals and syndicators that already exist (by id) are left untouched.

    Returns:
        Number of deals inserted.
    """
    inserted = 0
    for record in records:
        if await db.get(Deal, record["id"]) is not None:
            logger.info(f"Deal {record['id']} already stored, skipping")
            continue

        summary = record.get("syndicator")
        syndicator_id = record.get("syndicator_id")
        if summary and syndicator_id and await db.get(Syndicator, syndicator_id) is None:
            db.add(Syndicator(
                id=syndicator_id,
                verification_status=VerificationStatus.VERIFIED,
                **summary,
            ))

        fields = {k: v for k, v in record.items() if k not in ("media_urls", "syndicator")}
        fields["status"] = DealStatus(fields.get("status", DealStatus.DRAFT))
        db.add(Deal(**fields))

        for index, url in enumerate(record.get("media_urls") or []):
            db.add(DealMedia(
                deal_id=record["id"],
                type=MediaType.IMAGE,
                url=url,
                title=f"Image {index + 1}",
                description=f"Property image {index + 1}",
                order=index,
            ))

        for document in FALLBACK_DOCUMENTS.get(record["slug"], []):
            db.add(DealFile(deal_id=record["id"], **document))

        # flush so later records see this syndicator via db.get
        await db.flush()
        inserted += 1

    await db.commit()
    logger.info(f"Seeded {inserted} priority deals")
    return inserted
