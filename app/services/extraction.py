"""Contract extraction service.

Turns raw contract text into a validated ``ContractExtraction`` with a single
schema-constrained model call. Every failure is reported as an
``ExtractionError`` whose message is safe to show to clients; provider detail
goes to the logs only.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Any

from pydantic import ValidationError

from app.core.config import settings
from app.schemas.domain import ContractExtraction, describe_fields, extraction_json_schema
from app.services.llm import ModelProviderError, StructuredModel

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    """Failure categories surfaced to callers."""

    INVALID_INPUT = "invalid_input"
    EXTRACTION_FAILED = "extraction_failed"


_MESSAGES = {
    ErrorKind.INVALID_INPUT: "Contract text is required",
    ErrorKind.EXTRACTION_FAILED: "Failed to extract contract information",
}

_STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.EXTRACTION_FAILED: 500,
}


class ExtractionError(Exception):
    """Extraction failed; ``message`` is client-safe."""

    def __init__(self, kind: ErrorKind):
        self.kind = kind
        self.message = _MESSAGES[kind]
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        return _STATUS_CODES[self.kind]


def build_instruction(contract_text: str) -> str:
    """Render the model instruction for one contract.

    States the task and the fields to extract, the bilingual-input policy, the
    missing-information policy and the English-output policy, then embeds the
    contract text verbatim.
    """
    field_lines = "\n".join(
        f"- {spec.name} ({spec.kind}): {spec.description}" for spec in describe_fields()
    )
    return (
        "Analyze the following legal contract and extract the key information "
        "into these fields:\n"
        f"{field_lines}\n\n"
        "The contract may be written in Spanish or English. Handle both languages "
        "with equal accuracy.\n"
        "Be thorough and accurate. If information is not available, return an empty "
        "string or an empty list as appropriate. Never omit a field and never invent "
        "information that is not in the contract.\n"
        "Always return the extracted information in English, even if the original "
        "contract is in Spanish.\n\n"
        "Contract text:\n"
        f"{contract_text}"
    )


def validate_output(raw: Any) -> ContractExtraction:
    """Check raw model output against the schema.

    Fields must be present with the declared structural type; nothing is
    coerced and unknown fields are rejected.

    Raises:
        ExtractionError: ``EXTRACTION_FAILED`` if the output does not conform.
    """
    try:
        return ContractExtraction.model_validate(raw)
    except ValidationError as e:
        logger.error(
            "Model output failed schema validation (%d errors): %s",
            e.error_count(),
            e.errors(include_input=False, include_url=False),
        )
        raise ExtractionError(ErrorKind.EXTRACTION_FAILED) from e


def _require_text(contract_text: Any) -> str:
    if not isinstance(contract_text, str):
        logger.info("Rejected contract text of type %s", type(contract_text).__name__)
        raise ExtractionError(ErrorKind.INVALID_INPUT)
    if not contract_text.strip():
        logger.info("Rejected blank contract text (%d chars)", len(contract_text))
        raise ExtractionError(ErrorKind.INVALID_INPUT)
    return contract_text


async def extract(
    contract_text: Any,
    model: StructuredModel,
    *,
    timeout: float | None = None,
) -> ContractExtraction:
    """Extract contract facts with one schema-constrained model call.

    Args:
        contract_text: Raw contract text. Anything other than a non-blank string
            is rejected before the model is called.
        model: Structured-output model to call.
        timeout: Seconds to wait for the model; defaults to ``LLM_TIMEOUT_S``.

    Returns:
        The validated record, exactly as produced by the model.

    Raises:
        ExtractionError: ``INVALID_INPUT`` for bad input, ``EXTRACTION_FAILED``
            for any provider, timeout or validation failure.
    """
    text = _require_text(contract_text)
    timeout = settings.LLM_TIMEOUT_S if timeout is None else timeout

    instruction = build_instruction(text)
    logger.info(
        "Requesting extraction from %s for %d chars of contract text",
        getattr(model, "model", type(model).__name__),
        len(text),
    )

    try:
        raw = await asyncio.wait_for(
            model.complete(instruction, extraction_json_schema()),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        logger.error("Model call timed out after %ss", timeout)
        raise ExtractionError(ErrorKind.EXTRACTION_FAILED) from e
    except ModelProviderError as e:
        logger.error("Model provider error: %s", e, exc_info=e.__cause__ is not None)
        raise ExtractionError(ErrorKind.EXTRACTION_FAILED) from e
    except Exception as e:
        logger.exception("Unexpected error during model call")
        raise ExtractionError(ErrorKind.EXTRACTION_FAILED) from e

    result = validate_output(raw)
    logger.info(
        "Extraction complete: %d parties, %d penalties, %d key clauses",
        len(result.signing_parties),
        len(result.penalties),
        len(result.key_clauses),
    )
    return result


__all__ = [
    "ErrorKind",
    "ExtractionError",
    "build_instruction",
    "extract",
    "validate_output",
]
