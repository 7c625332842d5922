"""
Deal pages service: slug resolution, secondary data and action gating.
"""

from .actions import DealAction, ModalDescriptor, ModalKind, gate_action
from .providers import (
    DatabaseDealProvider,
    DealProvider,
    DealSource,
    FallbackChain,
    FallbackDealProvider,
    ResolvedDeal,
    slug_to_title,
)
from .resolver import (
    DealDetails,
    DealResolver,
    InvestmentInterest,
    count_investment_requests,
    fetch_media,
    fetch_public_files,
)

__all__ = [
    "DealAction",
    "ModalDescriptor",
    "ModalKind",
    "gate_action",
    "DatabaseDealProvider",
    "DealProvider",
    "DealSource",
    "FallbackChain",
    "FallbackDealProvider",
    "ResolvedDeal",
    "slug_to_title",
    "DealDetails",
    "DealResolver",
    "InvestmentInterest",
    "count_investment_requests",
    "fetch_media",
    "fetch_public_files",
]
