"""
Client configuration.

Environment variables:
- ELEPHANTASM_API_KEY (required unless passed explicitly)
- ELEPHANTASM_ANIMA_ID (optional default anima)
- ELEPHANTASM_ENDPOINT (optional, defaults to the production API)
- ELEPHANTASM_TIMEOUT (optional, request timeout in milliseconds)

Explicit constructor values always win over the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from elephantasm.core.exceptions import AuthenticationError, ConfigurationError

# Auto-load .env if present
load_dotenv(dotenv_path=".env", override=False)

DEFAULT_ENDPOINT = "https://api.elephantasm.com"
DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class ElephantasmSettings:
    """
    Immutable client settings.

    Fields:
    - api_key: Bearer credential sent with every request.
    - anima_id: Default anima used when a call does not name one.
    - endpoint: Base URL without trailing slash.
    - timeout_ms: Upper bound for one request/response round trip.
    """

    api_key: str
    anima_id: Optional[str]
    endpoint: str
    timeout_ms: int


def _parse_timeout(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"ELEPHANTASM_TIMEOUT must be an integer (ms), got {raw!r}.") from exc
    return value


def load_settings(
    api_key: Optional[str] = None,
    anima_id: Optional[str] = None,
    endpoint: Optional[str] = None,
    timeout: Optional[int] = None,
) -> ElephantasmSettings:
    """Merge explicit values with environment variables and defaults."""

    resolved_key = api_key or os.getenv("ELEPHANTASM_API_KEY", "")
    if not resolved_key:
        raise AuthenticationError(
            "API key required. Set ELEPHANTASM_API_KEY env var or pass api_key to the client."
        )

    resolved_endpoint = endpoint or os.getenv("ELEPHANTASM_ENDPOINT") or DEFAULT_ENDPOINT

    # 0 means "not set", like None
    if not timeout:
        raw_timeout = os.getenv("ELEPHANTASM_TIMEOUT")
        timeout = (_parse_timeout(raw_timeout) if raw_timeout else 0) or DEFAULT_TIMEOUT_MS
    if timeout < 0:
        raise ConfigurationError(f"Timeout must be a positive number of milliseconds, got {timeout}.")

    return ElephantasmSettings(
        api_key=resolved_key,
        anima_id=anima_id or os.getenv("ELEPHANTASM_ANIMA_ID") or None,
        endpoint=resolved_endpoint.rstrip("/"),
        timeout_ms=timeout,
    )
