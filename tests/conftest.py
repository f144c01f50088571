"""
Pytest configuration and shared fixtures for SDK tests.

HTTP traffic never leaves the process: clients are built with an
`httpx.MockTransport` that records every request and answers with a canned
handler.
"""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from elephantasm import Elephantasm

ENV_VARS = (
    "ELEPHANTASM_API_KEY",
    "ELEPHANTASM_ANIMA_ID",
    "ELEPHANTASM_ENDPOINT",
    "ELEPHANTASM_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make every test start without ELEPHANTASM_* variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with `payload` encoded as JSON (None -> null)."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=json.dumps(payload).encode(),
            headers={"Content-Type": "application/json"},
        )

    return handler


class RecordingTransport:
    """Collects outgoing requests and answers them through `handler`."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def respond():
    """Expose `json_response` to tests."""
    return json_response


@pytest.fixture
def make_recorder():
    """Expose `RecordingTransport` to tests."""
    return RecordingTransport


@pytest.fixture
def make_client():
    """Factory building a client wired to a recording mock transport."""

    def factory(
        handler: Callable[[httpx.Request], Any],
        api_key: Optional[str] = "sk_test_123",
        anima_id: Optional[str] = "anima-1",
        **kwargs: Any,
    ):
        recorder = RecordingTransport(handler)
        client = Elephantasm(api_key=api_key, anima_id=anima_id, transport=recorder.transport, **kwargs)
        return client, recorder

    return factory


@pytest.fixture
def mock_pack():
    return {
        "id": "pack-1",
        "anima_id": "anima-1",
        "session_memory_count": 2,
        "knowledge_count": 1,
        "long_term_memory_count": 1,
        "has_identity": True,
        "token_count": 500,
        "max_tokens": 2000,
        "content": {
            "context": "You are a helpful assistant.",
            "identity": {
                "personality_type": "INTJ",
                "communication_style": "direct",
                "prose": "A thoughtful analytical agent",
            },
            "session_memories": [
                {"id": "m1", "summary": "User prefers dark mode", "score": 0.9,
                 "breakdown": {"recency": 0.5, "importance": 0.4}},
                {"id": "m3", "summary": "User asked about billing", "score": 0.6,
                 "breakdown": {"recency": 0.4, "importance": 0.2}},
            ],
            "knowledge": [
                {"id": "k1", "content": "User timezone is PST", "type": "preference", "score": 0.8},
            ],
            "long_term_memories": [
                {"id": "m2", "summary": "User is a software engineer", "score": 0.7,
                 "breakdown": {"recency": 0.3, "importance": 0.4}},
            ],
            "temporal_context": {
                "last_event_at": "2026-01-12T10:00:00Z",
                "hours_ago": 2,
                "formatted": "2 hours ago",
            },
        },
        "compiled_at": "2026-01-12T12:00:00Z",
        "created_at": "2026-01-12T12:00:00Z",
    }


@pytest.fixture
def mock_event():
    return {
        "id": "evt-1",
        "anima_id": "anima-1",
        "event_type": "message.in",
        "content": "Hello!",
        "role": "user",
        "meta": {},
        "created_at": "2026-01-12T12:00:00Z",
        "updated_at": "2026-01-12T12:00:00Z",
    }


@pytest.fixture
def mock_anima():
    return {
        "id": "anima-new",
        "name": "Test Agent",
        "description": "A test agent",
        "meta": {},
        "created_at": "2026-01-12T12:00:00Z",
        "updated_at": "2026-01-12T12:00:00Z",
    }
