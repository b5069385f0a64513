"""API routes package."""

from app.routes.extract import router as extract_router
from app.routes.health import router as health_router

__all__ = ["extract_router", "health_router"]
