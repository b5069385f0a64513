"""Health check endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
def readiness_check():
    """Readiness probe - checks that a model provider is configured."""
    checks = {}
    all_ok = True

    if settings.OPENAI_API_KEY:
        checks["model_provider"] = "ok"
    else:
        checks["model_provider"] = "not configured"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ok" if all_ok else "degraded",
            "model": settings.MODEL_NAME,
            "checks": checks,
        },
    )
