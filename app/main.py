"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import setup_logging
from app.deps import reset_model
from app.routes import extract_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup, cleanup on shutdown."""
    setup_logging()
    logger.info("Starting %s (env=%s, model=%s)", settings.APP_NAME, settings.APP_ENV, settings.MODEL_NAME)

    yield

    reset_model()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Register routers
app.include_router(health_router)
app.include_router(extract_router)
