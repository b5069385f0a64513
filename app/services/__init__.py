"""Business logic services."""

from app.services.extraction import (
    ErrorKind,
    ExtractionError,
    build_instruction,
    extract,
    validate_output,
)
from app.services.llm import (
    ModelProviderError,
    OpenAIStructuredModel,
    StructuredModel,
    UnavailableModel,
    build_model,
)

__all__ = [
    "ErrorKind",
    "ExtractionError",
    "ModelProviderError",
    "OpenAIStructuredModel",
    "StructuredModel",
    "UnavailableModel",
    "build_instruction",
    "build_model",
    "extract",
    "validate_output",
]
