"""
Elephantasm - Long-Term Agentic Memory SDK.

Example:
    >>> import elephantasm
    >>> pack = await elephantasm.inject(anima_id="your-anima-id")
    >>> system_prompt = pack.as_prompt() if pack else ""
    >>> await elephantasm.extract("message.in", user_message)
    >>> await elephantasm.extract("message.out", assistant_response)

The module-level functions share one client built from ELEPHANTASM_*
environment variables. Construct `Elephantasm` directly for anything else.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from elephantasm.core.config import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT_MS, ElephantasmSettings
from elephantasm.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ElephantasmError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from elephantasm.dependencies.providers import get_client, reset_client
from elephantasm.infrastructure.models import (
    Anima,
    AnimaCreate,
    Event,
    EventCreate,
    EventType,
    IdentityContext,
    Memory,
    MemoryPack,
    MemoryPackContent,
    MemoryState,
    ScoredKnowledge,
    ScoredMemory,
    TemporalContext,
)
from elephantasm.services.client import Elephantasm
from elephantasm.services.event_types import resolve_event_type

__version__ = "0.1.0"


async def create_anima(
    name: str,
    description: Optional[str] = None,
    meta: Optional[Dict[str, Any]] = None,
) -> Anima:
    """Create a new anima with the default client."""
    return await get_client().create_anima(name, description, meta)


async def inject(
    anima_id: Optional[str] = None,
    query: Optional[str] = None,
    preset: Optional[str] = None,
) -> Optional[MemoryPack]:
    """Retrieve the latest memory pack with the default client."""
    return await get_client().inject(anima_id=anima_id, query=query, preset=preset)


async def extract(
    event_type: Union[EventType, str],
    content: str,
    *,
    anima_id: Optional[str] = None,
    session_id: Optional[str] = None,
    role: Optional[str] = None,
    author: Optional[str] = None,
    occurred_at: Optional[Union[datetime, str]] = None,
    meta: Optional[Dict[str, Any]] = None,
    importance_score: Optional[float] = None,
    summary: Optional[str] = None,
    source_uri: Optional[str] = None,
    dedupe_key: Optional[str] = None,
) -> Event:
    """Capture an event with the default client."""
    return await get_client().extract(
        event_type,
        content,
        anima_id=anima_id,
        session_id=session_id,
        role=role,
        author=author,
        occurred_at=occurred_at,
        meta=meta,
        importance_score=importance_score,
        summary=summary,
        source_uri=source_uri,
        dedupe_key=dedupe_key,
    )


__all__ = [
    "Elephantasm",
    "ElephantasmSettings",
    "DEFAULT_ENDPOINT",
    "DEFAULT_TIMEOUT_MS",
    "resolve_event_type",
    "get_client",
    "reset_client",
    "create_anima",
    "inject",
    "extract",
    # errors
    "ElephantasmError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "ServerError",
    "ConfigurationError",
    # models
    "Anima",
    "AnimaCreate",
    "Event",
    "EventCreate",
    "EventType",
    "IdentityContext",
    "Memory",
    "MemoryPack",
    "MemoryPackContent",
    "MemoryState",
    "ScoredKnowledge",
    "ScoredMemory",
    "TemporalContext",
]
