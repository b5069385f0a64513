"""Schemas for contract extraction."""

from app.schemas.api import ErrorResponse, ExtractRequest
from app.schemas.domain import (
    ContractExtraction,
    FieldSpec,
    describe_fields,
    extraction_json_schema,
)

__all__ = [
    "ContractExtraction",
    "ErrorResponse",
    "ExtractRequest",
    "FieldSpec",
    "describe_fields",
    "extraction_json_schema",
]
