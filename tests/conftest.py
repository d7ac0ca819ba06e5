"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from datetime import date
from typing import Callable

import httpx
import pytest

from covergen.api.services.cover_letter_service import CoverLetterService
from covergen.lib.storage.duckdb_store import DuckDBStateStore

SAMPLE_RESUME = """Jane Doe
(555) 123-4567 | jane.doe@example.com
123 Main St
Austin, TX 78701
linkedin.com/in/janedoe

Experience
Senior Engineer, Acme Corp
"""

SAMPLE_JOB = "Acme Corp is hiring a Staff Engineer to lead platform work."


class RecordingTransport:
    """Counts and keeps every request; answers with a fixed response."""

    def __init__(self, status_code: int = 200, payload: object | None = None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.content = content
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)


def openai_reply(text: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


@pytest.fixture
def make_client() -> Callable[..., tuple[httpx.Client, RecordingTransport]]:
    """Build an httpx client over a RecordingTransport."""
    clients: list[httpx.Client] = []

    def _make(**kwargs) -> tuple[httpx.Client, RecordingTransport]:
        transport = RecordingTransport(**kwargs)
        client = httpx.Client(transport=httpx.MockTransport(transport))
        clients.append(client)
        return client, transport

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def store():
    s = DuckDBStateStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def make_service(store):
    """CoverLetterService over the in-memory store with a fixed date."""

    def _make(client: httpx.Client | None = None) -> CoverLetterService:
        return CoverLetterService(store, state_key="test-state", client=client, today=lambda: date(2024, 1, 1))

    return _make
