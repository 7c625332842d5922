"""
Admin dashboard switchboard.

The dashboard shows one management panel at a time. Tabs map one-to-one
to panels through ``PANELS``; every ``AdminTab`` must have an entry.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from . import panels

logger = logging.getLogger(__name__)

PanelLoader = Callable[[AsyncSession], Awaitable[Dict[str, Any]]]


class AdminTab(str, Enum):
    """Dashboard tabs."""
    ANALYTICS = "analytics"
    USERS = "users"
    DEACTIVATED = "deactivated"
    PROPERTIES = "properties"
    CREDITS = "credits"
    IMPORT_INVESTORS = "import-investors"
    IMPORT_SYNDICATORS = "import-syndicators"
    SETTINGS = "settings"
    CLAIMS = "claims"
    VERIFICATION = "verification"
    SYSTEM = "system"


@dataclass(frozen=True)
class PanelSpec:
    """
    How a tab is shown and what it mounts.

    Attributes:
        label: Tab bar label.
        component: Client component the panel mounts.
        visible: Whether the tab bar shows this tab. Hidden tabs can still
            be selected directly.
        loader: Optional data loader for the panel payload.
    """
    label: str
    component: str
    visible: bool = True
    loader: Optional[PanelLoader] = None


PANELS: Dict[AdminTab, PanelSpec] = {
    AdminTab.ANALYTICS: PanelSpec("Analytics", "AnalyticsDashboard", loader=panels.load_analytics),
    AdminTab.USERS: PanelSpec("Users", "UserManagement", loader=panels.load_users),
    AdminTab.DEACTIVATED: PanelSpec(
        "Deactivated Users", "DeactivatedAccountsManagement",
        visible=False, loader=panels.load_deactivated,
    ),
    AdminTab.PROPERTIES: PanelSpec("Properties", "PropertyManagement", loader=panels.load_properties),
    AdminTab.CREDITS: PanelSpec("Credits", "CreditManagement", visible=False),
    AdminTab.CLAIMS: PanelSpec("Claim Requests", "ClaimRequests"),
    AdminTab.IMPORT_INVESTORS: PanelSpec("Import Investors", "InvestorImport", visible=False),
    AdminTab.IMPORT_SYNDICATORS: PanelSpec("Import Syndicators", "SyndicatorImport", visible=False),
    AdminTab.VERIFICATION: PanelSpec(
        "Syndicator Verification", "SyndicatorVerificationAdmin",
        loader=panels.load_verification,
    ),
    AdminTab.SYSTEM: PanelSpec("System Management", "SystemManagement", loader=panels.load_system),
    AdminTab.SETTINGS: PanelSpec("Settings", "LogoManager", loader=panels.load_settings),
}

_missing = set(AdminTab) - set(PANELS)
if _missing:
    raise RuntimeError(f"Admin tabs without a panel: {sorted(t.value for t in _missing)}")


@dataclass
class DashboardState:
    """Active tab of one dashboard. Starts on analytics; changes only by selection."""
    active_tab: AdminTab = AdminTab.ANALYTICS

    def select(self, tab: AdminTab) -> AdminTab:
        self.active_tab = AdminTab(tab)
        return self.active_tab


@dataclass
class Panel:
    """The single mounted panel."""
    tab: AdminTab
    label: str
    component: str
    data: Dict[str, Any] = field(default_factory=dict)


def list_tabs(include_hidden: bool = False) -> List[Dict[str, Any]]:
    """Tabs in tab-bar order."""
    return [
        {"id": tab.value, "label": spec.label, "visible": spec.visible}
        for tab, spec in PANELS.items()
        if spec.visible or include_hidden
    ]


async def render_panel(state: DashboardState, db: AsyncSession) -> Panel:
    """
    Mount the panel for the active tab.

    Args:
        state: Dashboard state holding the selected tab.
        db: Database session for the panel loader.

    Returns:
        Panel: the one panel for ``state.active_tab``.
    """
    spec = PANELS[state.active_tab]
    data: Dict[str, Any] = {}
    if spec.loader is not None:
        data = await spec.loader(db)
    logger.info(f"Mounted admin panel {spec.component} for tab '{state.active_tab.value}'")
    return Panel(tab=state.active_tab, label=spec.label, component=spec.component, data=data)
