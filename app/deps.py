"""Shared dependencies for FastAPI routes."""

from __future__ import annotations

import logging
from typing import Optional

from app.services.llm import ModelProviderError, StructuredModel, UnavailableModel, build_model

logger = logging.getLogger(__name__)

_model: Optional[StructuredModel] = None


def get_model() -> StructuredModel:
    """Get or lazily initialize the model provider singleton.

    Lazy initialization avoids failures at import time when the provider is not
    configured. A provider that cannot be built is not cached; requests get an
    ``UnavailableModel`` whose calls fail, so input validation still runs first.
    """
    global _model
    if _model is None:
        try:
            _model = build_model()
        except ModelProviderError as e:
            logger.error("Model provider unavailable: %s", e)
            return UnavailableModel(str(e))
    return _model


def reset_model() -> None:
    """Drop the cached provider (used by tests and on shutdown)."""
    global _model
    _model = None


__all__ = ["get_model", "reset_model"]
