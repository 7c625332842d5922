"""
Admin dashboard endpoints.

All endpoints require an admin profile.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from equitymd.api.deps import AdminUser, DbSession
from equitymd.services.admin import AdminTab, DashboardState, list_tabs, render_panel

router = APIRouter()

CLEAR_SITE_DATA = '"cache", "storage"'


# Response Models
class TabResponse(BaseModel):
    """Tab bar entry."""
    id: AdminTab
    label: str
    visible: bool


class PanelResponse(BaseModel):
    """The mounted panel."""
    tab: AdminTab
    label: str
    component: str
    data: Dict[str, Any] = {}


class DashboardResponse(BaseModel):
    """Dashboard with exactly one mounted panel."""
    active_tab: AdminTab
    tabs: List[TabResponse]
    panel: PanelResponse


class ClearCacheRequest(BaseModel):
    """Cache clear confirmation."""
    confirm: bool = False


class ClearCacheResponse(BaseModel):
    cleared: bool
    reload: bool
    message: str


async def build_dashboard(db: DbSession, tab: Optional[AdminTab] = None) -> DashboardResponse:
    """Select ``tab`` (default analytics) and mount its panel."""
    state = DashboardState()
    if tab is not None:
        state.select(tab)
    panel = await render_panel(state, db)
    return DashboardResponse(
        active_tab=state.active_tab,
        tabs=[TabResponse(**t) for t in list_tabs()],
        panel=PanelResponse(
            tab=panel.tab,
            label=panel.label,
            component=panel.component,
            data=panel.data,
        ),
    )


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    current_user: AdminUser,
    db: DbSession,
    tab: Optional[AdminTab] = None,
) -> DashboardResponse:
    """
    Render the admin dashboard.

    Args:
        tab: Selected tab. Defaults to analytics.
    """
    return await build_dashboard(db, tab)


@router.get("/tabs", response_model=List[TabResponse])
async def get_tabs(
    current_user: AdminUser,
    include_hidden: bool = False,
) -> List[TabResponse]:
    """List dashboard tabs in tab-bar order."""
    return [TabResponse(**t) for t in list_tabs(include_hidden=include_hidden)]


@router.post("/clear-cache", response_model=ClearCacheResponse)
async def clear_cache(
    payload: ClearCacheRequest,
    current_user: AdminUser,
    response: Response,
) -> ClearCacheResponse:
    """
    Clear the admin's browser storage.

    Sends ``Clear-Site-Data`` so the browser wipes its cache, local storage
    and session storage, then tells the client to reload. Requires
    ``confirm: true``.

    Raises:
        HTTPException: 400 without confirmation.
    """
    if not payload.confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Clear browser cache? This will refresh the page. Resend with confirm=true.",
        )

    response.headers["Clear-Site-Data"] = CLEAR_SITE_DATA
    return ClearCacheResponse(
        cleared=True,
        reload=True,
        message="Cache cleared successfully!",
    )
