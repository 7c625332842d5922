"""
Static page content and small derived values for deal pages.
"""

import re
from typing import Dict, Optional

from ...core.config import settings
from ...models.deal import DealRead

PAGE_META = {
    "title": "Invest in Top CRE Deals | EquityMD",
    "description": (
        "Explore CRE deals with active investment requests on EquityMD. Connect "
        "with verified syndicators and join accredited investors in commercial "
        "real estate opportunities."
    ),
    "keywords": (
        "CRE investment, commercial real estate deals, accredited investors, "
        "investment requests, real estate syndication"
    ),
}

# Overview videos shown on every deal of a syndicator
SYNDICATOR_VIDEOS: Dict[str, Dict[str, str]] = {
    "Sutera Properties": {
        "url": "https://www.youtube.com/watch?v=GM7zriIRpbg",
        "title": "Property Overview",
        "caption": "Take a virtual tour of this investment opportunity.",
    },
}

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def syndicator_slug(company_name: Optional[str]) -> Optional[str]:
    """``Back Bay Capital`` -> ``back-bay-capital``."""
    if not company_name:
        return None
    return _NON_ALNUM.sub("-", company_name.lower())


def cover_image_url(deal: DealRead) -> str:
    return deal.cover_image_url or settings.default_cover_image_url


def overview_video(deal: DealRead) -> Optional[Dict[str, str]]:
    if deal.syndicator is None:
        return None
    return SYNDICATOR_VIDEOS.get(deal.syndicator.company_name)
