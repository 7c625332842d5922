"""
Marketplace deal models.

A deal is an investment opportunity listed by a syndicator. Deals own
downloadable files, gallery media and investor interest records. All of
them are written by ingestion and admin tooling; the deal pages only read.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from sqlmodel import JSON, Column, Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


class DealStatus(str, Enum):
    """Listing status of a deal."""
    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"


class MediaType(str, Enum):
    """Kind of gallery item."""
    IMAGE = "image"
    VIDEO = "video"


class VerificationStatus(str, Enum):
    """Syndicator verification review state."""
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


# =============================================================================
# SYNDICATORS
# =============================================================================

class Syndicator(SQLModel, table=True):
    """
    Sponsor company that manages deals.

    Attributes:
        id: Primary key (string, e.g. "back-bay-capital").
        company_name: Display name.
        company_logo_url: Public logo URL.
        years_in_business: Track record length.
        company_description: Short company profile.
        website_url: Company site.
        total_deal_volume: Lifetime deal volume in USD.
        verification_status: Admin verification review state.
    """

    __tablename__ = "syndicators"

    id: str = Field(default_factory=_new_id, primary_key=True)
    company_name: str = Field(index=True)
    company_logo_url: Optional[str] = None
    years_in_business: Optional[int] = None
    company_description: Optional[str] = None
    website_url: Optional[str] = None
    total_deal_volume: Optional[float] = None
    verification_status: VerificationStatus = VerificationStatus.PENDING
    created_at: datetime = Field(default_factory=_utcnow)


class SyndicatorSummary(SQLModel):
    """Syndicator fields embedded in a deal view."""
    company_name: str
    company_logo_url: Optional[str] = None
    years_in_business: Optional[int] = None
    company_description: Optional[str] = None
    website_url: Optional[str] = None
    total_deal_volume: Optional[float] = None


# =============================================================================
# DEALS
# =============================================================================

class Deal(SQLModel, table=True):
    """
    Investment opportunity listing.

    Attributes:
        id: Primary key.
        syndicator_id: FK to the sponsoring syndicator.
        title: Listing title. Deal pages resolve slugs against it.
        slug: URL-safe form of the title.
        target_irr: Target investor IRR in percent.
        minimum_investment: Minimum ticket in USD.
        investment_term: Expected hold period in years.
        address: Structured address (street, city, state, zip).
        investment_highlights: Ordered bullet points.
        total_equity: Equity raise in USD.
    """

    __tablename__ = "deals"

    id: str = Field(default_factory=_new_id, primary_key=True)
    syndicator_id: Optional[str] = Field(default=None, foreign_key="syndicators.id", index=True)

    title: str = Field(index=True)
    slug: Optional[str] = Field(default=None, index=True)
    location: Optional[str] = None
    property_type: Optional[str] = None
    status: DealStatus = DealStatus.DRAFT

    target_irr: Optional[float] = None
    minimum_investment: Optional[float] = None
    investment_term: Optional[int] = None
    total_equity: Optional[float] = None

    description: Optional[str] = None
    address: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    investment_highlights: Optional[List[str]] = Field(default=[], sa_column=Column(JSON))

    featured: bool = False
    cover_image_url: Optional[str] = None

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class DealRead(SQLModel):
    """Deal as rendered on the details page."""
    id: str
    syndicator_id: Optional[str] = None
    title: str
    slug: Optional[str] = None
    location: Optional[str] = None
    property_type: Optional[str] = None
    status: DealStatus = DealStatus.DRAFT
    target_irr: Optional[float] = None
    minimum_investment: Optional[float] = None
    investment_term: Optional[int] = None
    total_equity: Optional[float] = None
    description: Optional[str] = None
    address: Optional[Dict[str, Any]] = None
    investment_highlights: List[str] = []
    featured: bool = False
    cover_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    syndicator: Optional[SyndicatorSummary] = None


# =============================================================================
# FILES & MEDIA
# =============================================================================

class DealFileBase(SQLModel):
    """Fields shared by stored and rendered deal files."""
    deal_id: str = Field(foreign_key="deals.id", index=True)
    file_name: str
    file_type: str  # PDF, XLSX, ...
    file_size: int = 0  # bytes
    file_url: str
    is_private: bool = False


class DealFile(DealFileBase, table=True):
    """Document attached to a deal. Private files never reach deal pages."""

    __tablename__ = "deal_files"

    id: str = Field(default_factory=_new_id, primary_key=True)
    created_at: datetime = Field(default_factory=_utcnow)


class DealFileRead(DealFileBase):
    id: str
    created_at: datetime


class DealMediaBase(SQLModel):
    """Fields shared by stored and rendered gallery items."""
    deal_id: str = Field(foreign_key="deals.id", index=True)
    type: MediaType = MediaType.IMAGE
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    order: int = 0  # display sequence, ascending


class DealMedia(DealMediaBase, table=True):
    """Gallery image or video for a deal."""

    __tablename__ = "deal_media"

    id: str = Field(default_factory=_new_id, primary_key=True)


class DealMediaRead(DealMediaBase):
    id: str


# =============================================================================
# INVESTOR INTEREST
# =============================================================================

class InvestmentRequest(SQLModel, table=True):
    """
    Investor request to invest in a deal.

    Only counted by deal pages; request details are handled by the
    syndicator workflow.
    """

    __tablename__ = "investment_requests"

    id: Optional[int] = Field(default=None, primary_key=True)
    deal_id: str = Field(index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=_utcnow)
