"""
Elephantasm client facade.

Application code talks to `Elephantasm`; the transport and the event type
resolver stay internal. Each method is a single stateless round trip.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from elephantasm.core.config import ElephantasmSettings, load_settings
from elephantasm.core.exceptions import ConfigurationError, ElephantasmError
from elephantasm.core.logger import get_logger
from elephantasm.infrastructure.models import (
    Anima,
    AnimaCreate,
    Event,
    EventCreate,
    EventType,
    MemoryPack,
)
from elephantasm.services.event_types import resolve_event_type
from elephantasm.services.transport import Transport

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Elephantasm:
    """
    HTTP client for the Elephantasm long-term agentic memory API.

    Example:
        async with Elephantasm(api_key="sk_live_...", anima_id="...") as client:
            pack = await client.inject()
            system_prompt = pack.as_prompt() if pack else ""
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        anima_id: Optional[str] = None,
        endpoint: Optional[str] = None,
        timeout: Optional[int] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            api_key: Bearer credential; falls back to ELEPHANTASM_API_KEY.
            anima_id: Default anima; falls back to ELEPHANTASM_ANIMA_ID.
            endpoint: API base URL; falls back to ELEPHANTASM_ENDPOINT.
            timeout: Request timeout in milliseconds (default 30000).
            transport: Optional httpx transport, mainly for tests.

        Raises:
            AuthenticationError: no API key was passed or found in the environment.
        """
        self._settings: ElephantasmSettings = load_settings(
            api_key=api_key,
            anima_id=anima_id,
            endpoint=endpoint,
            timeout=timeout,
        )
        self._transport = Transport(
            api_key=self._settings.api_key,
            endpoint=self._settings.endpoint,
            timeout_ms=self._settings.timeout_ms,
            transport=transport,
        )
        logger.debug(
            "Elephantasm client initialized",
            endpoint=self._settings.endpoint,
            default_anima=self._settings.anima_id,
        )

    # -------------------------------------------------------------------------
    # Configuration (read-only)
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> ElephantasmSettings:
        return self._settings

    @property
    def anima_id(self) -> Optional[str]:
        return self._settings.anima_id

    @property
    def endpoint(self) -> str:
        return self._settings.endpoint

    @property
    def timeout(self) -> int:
        return self._settings.timeout_ms

    async def aclose(self) -> None:
        """Nothing to release: every request uses its own short-lived HTTP client."""
        return None

    async def __aenter__(self) -> "Elephantasm":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Public API Methods
    # -------------------------------------------------------------------------

    async def create_anima(
        self,
        name: str,
        description: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> Anima:
        """
        Create a new anima (agent entity).

        Args:
            name: Human-readable name for the anima
            description: Optional description
            meta: Optional metadata dictionary

        Returns:
            The anima record assigned by the server.
        """
        fields: Dict[str, Any] = {"name": name}
        if description is not None:
            fields["description"] = description
        if meta is not None:
            fields["meta"] = meta

        data = await self._transport.request(
            "/animas",
            "POST",
            json=AnimaCreate.model_construct(**fields).to_payload(),
        )
        return _parse(Anima, data)

    async def inject(
        self,
        anima_id: Optional[str] = None,
        query: Optional[str] = None,
        preset: Optional[str] = None,
    ) -> Optional[MemoryPack]:
        """
        Retrieve the latest memory pack for context injection.

        Args:
            anima_id: Anima to read; defaults to the client's anima.
            query: Optional query steering pack compilation.
            preset: Optional named compilation preset.

        Returns:
            The memory pack, or None when the anima has no pack yet.
        """
        resolved_anima_id = self._resolve_anima_id(anima_id)

        params: Dict[str, str] = {}
        if query:
            params["query"] = query
        if preset:
            params["preset"] = preset

        data = await self._transport.request(
            f"/animas/{quote(resolved_anima_id, safe='')}/memory-packs/latest",
            params=params or None,
        )
        if data is None:
            logger.debug("No memory pack available", anima_id=resolved_anima_id)
            return None

        return _parse(MemoryPack, data)

    async def extract(
        self,
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
        """
        Capture an event (message, tool call, ...) for memory synthesis.

        Optional arguments left as None are not sent at all.

        Args:
            event_type: Dot-notation value ('message.in') or alias ('MESSAGE_IN')
            content: Event content (message text, tool output, ...)
            anima_id: Anima owning the event; defaults to the client's anima.

        Returns:
            The event record created by the server.
        """
        fields: Dict[str, Any] = {
            "anima_id": self._resolve_anima_id(anima_id),
            "event_type": resolve_event_type(event_type),
            "content": content,
        }
        if isinstance(occurred_at, datetime):
            occurred_at = occurred_at.isoformat()
        optional_fields = {
            "session_id": session_id,
            "role": role,
            "author": author,
            "occurred_at": occurred_at,
            "meta": meta,
            "importance_score": importance_score,
            "summary": summary,
            "source_uri": source_uri,
            "dedupe_key": dedupe_key,
        }
        fields.update({key: value for key, value in optional_fields.items() if value is not None})

        data = await self._transport.request(
            "/events",
            "POST",
            json=EventCreate.model_construct(**fields).to_payload(),
        )
        return _parse(Event, data)

    # -------------------------------------------------------------------------
    # Internal Helpers
    # -------------------------------------------------------------------------

    def _resolve_anima_id(self, provided_id: Optional[str]) -> str:
        anima_id = provided_id or self._settings.anima_id
        if not anima_id:
            raise ConfigurationError(
                "anima_id required. Set ELEPHANTASM_ANIMA_ID env var, pass to constructor, or pass to method."
            )
        return anima_id


def _parse(model: Type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        logger.warning("Malformed API response", model=model.__name__, errors=exc.error_count())
        raise ElephantasmError(f"Malformed response for {model.__name__}: {exc}") from exc
