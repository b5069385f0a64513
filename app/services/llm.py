"""Structured-output model providers.

The extraction service talks to a generative model through the
``StructuredModel`` protocol: one call that takes an instruction plus a JSON
Schema and returns a JSON object shaped by that schema. ``OpenAIStructuredModel``
is the production implementation, using Chat Completions with Structured
Outputs in strict mode.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol, runtime_checkable

from openai import AsyncOpenAI, OpenAIError

from app.core.config import settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a legal document analyzer. You read contracts written in Spanish "
    "or English and report their key facts in English, using only information "
    "present in the contract text."
)

SCHEMA_NAME = "contract_extraction"


class ModelProviderError(RuntimeError):
    """Raised when the model provider fails or returns unusable output."""

    pass


@runtime_checkable
class StructuredModel(Protocol):
    """Contract for schema-constrained generation."""

    async def complete(self, instruction: str, schema: dict[str, Any]) -> dict[str, Any]:
        ...


class OpenAIStructuredModel:
    """``StructuredModel`` backed by the OpenAI Chat Completions API."""

    def __init__(
        self,
        client: AsyncOpenAI,
        *,
        model: str,
        temperature: float = 0.1,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature

    async def complete(self, instruction: str, schema: dict[str, Any]) -> dict[str, Any]:
        """Run one constrained completion and return the parsed JSON object.

        Raises:
            ModelProviderError: On API errors, refusals, empty or non-JSON output.
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": instruction},
                ],
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": SCHEMA_NAME,
                        "strict": True,
                        "schema": schema,
                    },
                },
            )
        except OpenAIError as e:
            raise ModelProviderError(f"OpenAI request failed: {e}") from e

        message = response.choices[0].message
        if getattr(message, "refusal", None):
            raise ModelProviderError(f"Model refused: {message.refusal}")

        content = message.content
        if not content:
            raise ModelProviderError("Empty response from model")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ModelProviderError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise ModelProviderError(f"Expected a JSON object, got {type(data).__name__}")
        return data


class UnavailableModel:
    """Stand-in used when no provider could be configured; every call fails."""

    def __init__(self, reason: str):
        self.reason = reason

    async def complete(self, instruction: str, schema: dict[str, Any]) -> dict[str, Any]:
        raise ModelProviderError(self.reason)


def build_model(
    *,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    model: Optional[str] = None,
) -> OpenAIStructuredModel:
    """Build the OpenAI-backed model from settings.

    The client is created with ``max_retries=0``: each extraction is a single
    attempt and the caller bounds it with its own timeout.

    Raises:
        ModelProviderError: If the client cannot be configured (e.g. no API key).
    """
    try:
        client = AsyncOpenAI(
            api_key=api_key or settings.OPENAI_API_KEY or None,
            base_url=base_url or settings.OPENAI_BASE_URL,
            timeout=settings.LLM_TIMEOUT_S,
            max_retries=0,
        )
    except OpenAIError as e:
        raise ModelProviderError(f"Cannot configure OpenAI client: {e}") from e
    name = model or settings.MODEL_NAME
    logger.info("Configured OpenAI structured model %s", name)
    return OpenAIStructuredModel(client, model=name, temperature=settings.LLM_TEMPERATURE)


__all__ = [
    "ModelProviderError",
    "OpenAIStructuredModel",
    "StructuredModel",
    "SYSTEM_PROMPT",
    "UnavailableModel",
    "build_model",
]
