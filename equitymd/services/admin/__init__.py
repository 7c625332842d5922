"""
Admin dashboard service.
"""

from .dashboard import (
    PANELS,
    AdminTab,
    DashboardState,
    Panel,
    PanelSpec,
    list_tabs,
    render_panel,
)

__all__ = [
    "PANELS",
    "AdminTab",
    "DashboardState",
    "Panel",
    "PanelSpec",
    "list_tabs",
    "render_panel",
]
