"""Pytest configuration and fixtures."""

import os

# Keep the real provider unconfigured unless a live test opts in
os.environ.setdefault("OPENAI_API_KEY", "")

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from app.deps import get_model, reset_model
from app.main import app


def _valid_record() -> dict[str, Any]:
    return {
        "signingParties": ["Acme Corp", "Beta LLC"],
        "startDate": "Jan 1 2024",
        "endDate": "Jan 1 2026",
        "duration": "two years",
        "penalties": ["5% penalty on late payments"],
        "contractPurpose": "Commercial agreement between Acme Corp and Beta LLC",
        "keyClauses": ["Term of two years", "Late payment penalty of 5%"],
    }


class FakeModel:
    """``StructuredModel`` returning a fixed response and recording every call."""

    def __init__(self, response: Any = None, error: Optional[BaseException] = None):
        self.response = _valid_record() if response is None else response
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    async def complete(self, instruction: str, schema: dict[str, Any]) -> Any:
        self.calls.append((instruction, schema))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def valid_record():
    """Model output for the Acme / Beta sample contract."""
    return _valid_record()


@pytest.fixture
def make_model():
    """Factory for fake models with a custom response or error."""
    return FakeModel


@pytest.fixture
def fake_model():
    """A fake model returning the sample record."""
    return FakeModel()


@pytest.fixture
def api_client():
    """Build a TestClient with the given model injected into the app."""
    clients = []

    def _make(model) -> TestClient:
        app.dependency_overrides[get_model] = lambda: model
        client = TestClient(app, raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
    app.dependency_overrides.clear()
    reset_model()
