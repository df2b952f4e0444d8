"""tests/crpt_api/conftest.py

Common fixtures for the entire test suite.
"""

from __future__ import annotations

import json
import os
from typing import Callable

import httpx
import pytest
from typer.testing import CliRunner


class ManualTicker:
    """Ticker driven by the test: fire() stands in for an elapsed interval."""

    def __init__(self) -> None:
        self.interval: float | None = None
        self.callback: Callable[[], None] | None = None
        self.started = False
        self.stopped = False

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def fire(self, times: int = 1) -> None:
        if not self.started or self.stopped:
            return
        for _ in range(times):
            self.callback()


@pytest.fixture
def manual_ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CRPT_API_* variables from the developer shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("CRPT_API_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with one that uses a MockTransport.

    Returns a function that registers responses; every request seen is
    appended to ``add_response.requests``.
    """
    responses: dict[tuple[str, str], tuple[int, bytes] | Exception] = {}
    seen: list[httpx.Request] = []
    original_client = httpx.Client

    def add_response(
        url: str,
        method: str = "POST",
        status_code: int = 200,
        json_payload: dict | None = None,
        text: str = "",
        error: Exception | None = None,
    ):
        """Register a mock response (or a transport error) for a URL and method."""
        if error is not None:
            responses[(method.upper(), url)] = error
            return
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = text.encode("utf-8")
        responses[(method.upper(), url)] = (status_code, body)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        entry = responses.get((request.method, str(request.url)))
        if entry is None:
            return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")
        if isinstance(entry, Exception):
            raise entry
        status, body = entry
        return httpx.Response(status, content=body)

    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    add_response.requests = seen  # type: ignore[attr-defined]
    return add_response


@pytest.fixture
def sample_wire() -> dict:
    return {
        "description": {"participantInn": "7700000000"},
        "doc_id": "12345",
        "doc_status": "ACTIVE",
        "doc_type": "LP_INTRODUCE_GOODS",
        "importRequest": True,
        "owner_inn": "7700000001",
        "participant_inn": "7700000000",
        "producer_inn": "7700000002",
        "production_date": "2020-01-23",
        "production_type": "OWN_PRODUCTION",
        "products": [
            {
                "certificate_document": "CONFORMITY_CERTIFICATE",
                "certificate_document_date": "2020-01-23",
                "certificate_document_number": "123",
                "owner_inn": "7700000001",
                "producer_inn": "7700000002",
                "production_date": "2020-01-23",
                "tnved_code": "6401100000",
                "uit_code": "010463003407001221SxMGorvNuq6Wk91fgr92sdfsdf",
                "uitu_code": None,
            }
        ],
        "reg_date": "2020-01-24",
        "reg_number": "reg-1",
    }
