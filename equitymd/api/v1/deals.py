"""
Deal page endpoints.

Public: anyone can view a deal. Actions (invest, contact) are gated on
sign-in by returning the modal the client should open.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from equitymd.api.deps import DbSession, OptionalUser
from equitymd.models.deal import DealFileRead, DealMediaRead, DealRead
from equitymd.services.deals import (
    DealAction,
    DealDetails,
    DealResolver,
    ModalDescriptor,
    gate_action,
)
from equitymd.services.deals.presentation import (
    PAGE_META,
    cover_image_url,
    overview_video,
    syndicator_slug,
)

router = APIRouter()


# Response Models
class PageMetaResponse(BaseModel):
    """Head metadata for the deal page."""
    title: str
    description: str
    keywords: str


class InvestmentInterestResponse(BaseModel):
    """Investor interest signal."""
    count: int = 0
    loading: bool = False


class VideoResponse(BaseModel):
    """Overview video embed."""
    url: str
    title: str
    caption: Optional[str] = None


class DealDetailsResponse(BaseModel):
    """Complete deal page payload."""
    deal: DealRead
    source: str
    files: List[DealFileRead]
    media: List[DealMediaRead]
    investment_requests: InvestmentInterestResponse
    cover_image_url: str
    syndicator_slug: Optional[str] = None
    video: Optional[VideoResponse] = None
    meta: PageMetaResponse


def build_deal_page(details: DealDetails) -> DealDetailsResponse:
    """Assemble the page payload from a resolved deal."""
    video: Optional[Dict[str, str]] = overview_video(details.deal)
    return DealDetailsResponse(
        deal=details.deal,
        source=details.source.value,
        files=details.files,
        media=details.media,
        investment_requests=InvestmentInterestResponse(
            count=details.investment_requests.count,
            loading=details.investment_requests.loading,
        ),
        cover_image_url=cover_image_url(details.deal),
        syndicator_slug=syndicator_slug(
            details.deal.syndicator.company_name if details.deal.syndicator else None
        ),
        video=VideoResponse(**video) if video else None,
        meta=PageMetaResponse(**PAGE_META),
    )


async def _resolve_or_404(slug: str, db: DbSession) -> DealDetails:
    details = await DealResolver(db).resolve(slug)
    if details is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Deal not found",
        )
    return details


@router.get("/{slug}", response_model=DealDetailsResponse)
async def get_deal(slug: str, db: DbSession) -> DealDetailsResponse:
    """
    Resolve a deal page by slug.

    Looks the deal up in the database first and falls back to the
    priority-deal table. Files, media and the investment request count
    degrade to empty/zero on errors.

    Raises:
        HTTPException: 404 when no source knows the slug.
    """
    return build_deal_page(await _resolve_or_404(slug, db))


@router.post("/{slug}/actions/{action}", response_model=ModalDescriptor)
async def deal_action(
    slug: str,
    action: DealAction,
    db: DbSession,
    current_user: OptionalUser,
) -> ModalDescriptor:
    """
    Handle "Invest Now" / "Contact Syndicator".

    Returns the one modal to open: the sign-in prompt for anonymous
    viewers, otherwise the message composer.
    """
    details = await _resolve_or_404(slug, db)
    return gate_action(action, current_user, details.deal)
