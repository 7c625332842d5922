"""
EquityMD - Main FastAPI Application.

Entry point for the marketplace backend: the JSON API under /api/v1 and
the page routes the web front end is served from.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated, Optional

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse

from equitymd.core.config import settings
from equitymd.core.database import init_db
from equitymd.api.deps import DbSession, OptionalUser, oauth2_scheme
from equitymd.api.v1.admin.dashboard import build_dashboard
from equitymd.api.v1.deals import build_deal_page
from equitymd.api.v1.router import api_router
from equitymd.services.admin import AdminTab
from equitymd.services.deals import DealResolver

# Built front end (equitymd/main.py -> web/dist)
STATIC_DIR = Path(__file__).parent.parent / "web" / "dist"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    print(f"🚀 Starting {settings.app_name}...")
    await init_db()
    print("✅ Database initialized")

    yield

    # Shutdown
    print(f"👋 Shutting down {settings.app_name}...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Commercial real estate investment marketplace",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # React dev server
        "http://localhost:5173",  # Vite dev server
        "http://localhost:8000",  # FastAPI server
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/api/v1")


def _page(name: str) -> Optional[Path]:
    html_file = STATIC_DIR / name / "index.html"
    return html_file if html_file.exists() else None


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "name": settings.app_name,
        "status": "running",
        "version": "0.1.0",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/404")
async def not_found_page():
    """Not-found page deal pages redirect to."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Page not found"},
    )


@app.get("/deals/{slug}")
async def deal_page(slug: str, db: DbSession):
    """Serve a deal page, or redirect to /404 when the slug is unknown."""
    resolver = DealResolver(db)
    html_file = _page("deal-details")
    if html_file:
        # the front end loads details itself; only the 404 decision is needed
        if await resolver.find(slug) is None:
            return RedirectResponse(url="/404")
        return FileResponse(html_file, media_type="text/html")

    details = await resolver.resolve(slug)
    if details is None:
        return RedirectResponse(url="/404")
    return build_deal_page(details)


@app.get("/admin")
async def admin_page(
    db: DbSession,
    current_user: OptionalUser,
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
    tab: Optional[AdminTab] = None,
):
    """
    Serve the admin dashboard.

    No token yet: loading placeholder. Rejected token (expired, unknown or
    deactivated account) or non-admin: redirect home. Panels are only
    loaded once the admin check passes.
    """
    if current_user is None:
        if token:
            return RedirectResponse(url="/")
        return {"status": "loading", "message": "Loading...", "home_url": "/"}

    if not current_user.is_admin:
        return RedirectResponse(url="/")

    html_file = _page("admin")
    if html_file:
        return FileResponse(html_file, media_type="text/html")
    return await build_dashboard(db, tab)
