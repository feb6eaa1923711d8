"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solforge import __version__
from solforge.api.errors import register_error_handlers
from solforge.config import Settings, get_settings
from solforge.web.services.balance_service import BalanceService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    owned = None
    if app.state.balance_service is None:
        owned = BalanceService.from_settings(app.state.settings)
        app.state.balance_service = owned
    yield
    # Shutdown
    if owned is not None:
        await owned.close()
        app.state.balance_service = None


def create_app(
    settings: Optional[Settings] = None,
    balance_service: Optional[BalanceService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        balance_service: Pre-built balance service; when omitted one is
            built from settings at startup and closed at shutdown

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Solforge API",
        description="Stateless Solana instruction and signing API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.balance_service = balance_service

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Register routes
    from solforge.api.routes import health
    from solforge.web.controllers import (
        balance_router,
        keypair_router,
        message_router,
        sol_router,
        token_router,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(balance_router)
    app.include_router(keypair_router)
    app.include_router(token_router)
    app.include_router(message_router)
    app.include_router(sol_router)

    return app


# Default app instance
app = create_app()
