"""
Admin API router.

All routes in this module require admin authentication.
"""

from fastapi import APIRouter

from .dashboard import router as dashboard_router

router = APIRouter()

# Dashboard endpoints
router.include_router(
    dashboard_router,
    prefix="/dashboard",
    tags=["Admin Dashboard"],
)
