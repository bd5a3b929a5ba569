"""Health check endpoints."""

from fastapi import APIRouter, Request

from limitblink import __version__
from limitblink.config import get_settings

router = APIRouter()

ACTIONS_PREFIX = "/api/actions"


def mounted_actions(request: Request) -> list[str]:
    """Paths of the action endpoints registered on the app."""
    paths = {
        route.path
        for route in request.app.routes
        if getattr(route, "path", "").startswith(ACTIONS_PREFIX)
    }
    return sorted(paths)


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "limitblink"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Mounted actions and redacted configuration."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "limitblink",
        "version": __version__,
        "actions": mounted_actions(request),
        "config": settings.get_safe_dict(),
    }
