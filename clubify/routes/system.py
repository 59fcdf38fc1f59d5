"""
System Routes
Banner, health, auth self-check and dashboard overview
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from clubify import __version__
from clubify.auth import get_current_user
from clubify.config import settings
from clubify.schemas.dashboard import DashboardResponse
from clubify.schemas.user import SessionUser
from clubify.services.dashboard_service import dashboard_service

router = APIRouter()

STARTED_AT = time.monotonic()


@router.get("/api")
async def banner():
    return {
        "message": f"{settings.APP_NAME} API Server is running!",
        "version": __version__,
        "status": "active"
    }


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3)
    }


@router.get("/api/test-auth")
async def test_auth(current_user: dict = Depends(get_current_user)):
    """Echo the user resolved from the `user-id` header"""
    return {
        "success": True,
        "message": "Authentication working",
        "user": SessionUser.model_validate(current_user).model_dump(by_alias=True)
    }


@router.get("/api/dashboard", response_model=DashboardResponse)
async def dashboard(current_user: dict = Depends(get_current_user)):
    """Counts for the dashboard overview, scoped to the caller's role"""
    overview = await dashboard_service.get_overview(current_user)
    return {"success": True, **overview}
