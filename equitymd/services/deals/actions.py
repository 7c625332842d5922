"""
Deal page call-to-action gate.

"Invest Now" and "Contact Syndicator" both open a message composer for a
signed-in viewer. Anonymous viewers get the sign-in prompt instead.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ...models.deal import DealRead
from ...models.user import User, UserType


class DealAction(str, Enum):
    """Buttons on the deal page."""
    INVEST = "invest"
    CONTACT = "contact"


class ModalKind(str, Enum):
    """Modal the client should open."""
    AUTH = "auth"
    INVEST = "invest"
    MESSAGE = "message"


class ModalDescriptor(BaseModel):
    """Exactly one modal to open in response to a deal action."""
    modal: ModalKind
    is_investment: bool = False
    deal_id: Optional[str] = None
    deal_title: Optional[str] = None
    syndicator_id: Optional[str] = None
    syndicator_name: Optional[str] = None
    default_type: Optional[UserType] = None


def gate_action(action: DealAction, user: Optional[User], deal: DealRead) -> ModalDescriptor:
    """
    Decide which modal a deal action opens.

    Args:
        action: Requested action.
        user: Current viewer, or None when signed out.
        deal: Deal the action targets.

    Returns:
        ModalDescriptor: auth prompt for anonymous viewers, otherwise the
        message composer (flagged as an investment inquiry for ``invest``).
    """
    if user is None:
        return ModalDescriptor(modal=ModalKind.AUTH, default_type=UserType.INVESTOR)

    is_investment = action == DealAction.INVEST
    return ModalDescriptor(
        modal=ModalKind.INVEST if is_investment else ModalKind.MESSAGE,
        is_investment=is_investment,
        deal_id=deal.id,
        deal_title=deal.title,
        syndicator_id=deal.syndicator_id,
        syndicator_name=deal.syndicator.company_name if deal.syndicator else "Syndicator",
    )
