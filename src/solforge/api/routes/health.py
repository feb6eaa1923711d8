"""Health check endpoints."""

from fastapi import APIRouter, Request

from solforge import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "solforge"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Detailed health check with configuration info."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": "solforge",
        "version": __version__,
        "balance_lookup": getattr(request.app.state, "balance_service", None) is not None,
        "config": settings.get_safe_dict(),
    }
