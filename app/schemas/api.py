"""API request and response models for the extraction endpoint."""

from pydantic import BaseModel, Field


class ExtractRequest(BaseModel):
    """Body of ``POST /api/extract``."""

    contractText: str = Field(description="Raw contract text, Spanish or English")


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    error: str
