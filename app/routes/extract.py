"""Contract extraction endpoint."""

import asyncio
import contextlib
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.deps import get_model
from app.schemas.api import ErrorResponse, ExtractRequest
from app.schemas.domain import ContractExtraction
from app.services.extraction import ExtractionError, extract
from app.services.llm import StructuredModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["extract"])

# Non-standard status (nginx convention) for requests abandoned by the client
CLIENT_CLOSED_REQUEST = 499


class ClientDisconnected(Exception):
    """The client went away before the extraction finished."""

    pass


async def _read_contract_text(request: Request) -> Any:
    """Return ``contractText`` from the JSON body, or None if the body is unusable."""
    try:
        payload = await request.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    return payload.get("contractText")


async def _run_until_disconnected(request: Request, coro, poll_interval: float):
    """Await ``coro``, cancelling it if the client disconnects first."""
    task = asyncio.create_task(coro)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()


@router.post(
    "/extract",
    response_model=ContractExtraction,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ExtractRequest.model_json_schema()}},
        }
    },
)
async def extract_contract(
    request: Request,
    model: StructuredModel = Depends(get_model),
):
    """Extract key facts from pasted contract text."""
    contract_text = await _read_contract_text(request)

    try:
        result = await _run_until_disconnected(
            request,
            extract(contract_text, model),
            settings.DISCONNECT_POLL_S,
        )
    except ExtractionError as e:
        return JSONResponse(status_code=e.http_status, content={"error": e.message})
    except ClientDisconnected:
        logger.warning("Client disconnected; extraction cancelled and result discarded")
        return JSONResponse(
            status_code=CLIENT_CLOSED_REQUEST,
            content={"error": "Client closed request"},
        )

    return JSONResponse(content=result.model_dump(mode="json", by_alias=True))
