"""FastAPI application factory."""

from fastapi import FastAPI

from limitblink import __version__
from limitblink.config import get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="limitblink",
        description="Solana Actions for Jupiter limit orders",
        version=__version__,
        debug=settings.debug,
    )

    # Register routes
    from limitblink.api.routes import actions_json, health
    from limitblink.web.controllers import limit_order_router, limit_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(actions_json.router, tags=["Actions"])
    app.include_router(limit_router)
    app.include_router(limit_order_router)

    return app
