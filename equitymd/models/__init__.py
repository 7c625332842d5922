"""
Database models using SQLModel.
"""

from .user import User, UserType, UserCreate, UserRead
from .deal import (
    Deal,
    DealFile,
    DealMedia,
    DealStatus,
    InvestmentRequest,
    MediaType,
    Syndicator,
    SyndicatorSummary,
    VerificationStatus,
    DealRead,
    DealFileRead,
    DealMediaRead,
)

__all__ = [
    # Accounts
    "User",
    "UserType",
    "UserCreate",
    "UserRead",
    # Marketplace
    "Deal",
    "DealFile",
    "DealMedia",
    "DealStatus",
    "InvestmentRequest",
    "MediaType",
    "Syndicator",
    "SyndicatorSummary",
    "VerificationStatus",
    "DealRead",
    "DealFileRead",
    "DealMediaRead",
]
