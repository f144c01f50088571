"""
Authenticated HTTP transport for the Elephantasm API.

Every call is one request/response round trip on a short-lived
`httpx.AsyncClient`: no pooling, no retries. Failures are mapped onto the
SDK's exception taxonomy so callers only ever see `ElephantasmError`
subclasses.
"""
from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional

import httpx

from elephantasm.core.exceptions import ElephantasmError, exception_from_status
from elephantasm.core.logger import get_logger

logger = get_logger(__name__)


class Transport:
    """Sends requests to `<endpoint>/api<path>` with bearer authentication."""

    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        timeout_ms: int,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = f"{endpoint}/api"
        self._timeout_ms = timeout_ms
        self._timeout_seconds = timeout_ms / 1000
        # Test hook; production traffic uses httpx's default transport
        self._transport = transport

    def _build_headers(self, extra: Optional[Mapping[str, str]]) -> httpx.Headers:
        # Case-insensitive, so a caller header never duplicates the defaults
        headers = httpx.Headers(extra)
        headers["Authorization"] = f"Bearer {self._api_key}"
        headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        path: str,
        method: str = "GET",
        *,
        json: Any = None,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Perform one API call and return the decoded JSON body.

        Raises:
            ElephantasmError: or one of its subclasses for non-2xx answers,
                timeouts and transport failures.
        """
        try:
            return await asyncio.wait_for(
                self._send(path, method, json=json, params=params, headers=headers),
                timeout=self._timeout_seconds,
            )
        except ElephantasmError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("Request timed out", method=method, path=path, timeout_ms=self._timeout_ms)
            raise ElephantasmError(f"Request timeout after {self._timeout_ms}ms") from exc
        except Exception as exc:
            logger.warning("Request failed", method=method, path=path, error=str(exc))
            raise ElephantasmError(f"Request failed: {exc}") from exc

    async def _send(
        self,
        path: str,
        method: str,
        *,
        json: Any,
        params: Optional[Mapping[str, str]],
        headers: Optional[Mapping[str, str]],
    ) -> Any:
        async with httpx.AsyncClient(
            timeout=self._timeout_seconds,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            logger.debug("Sending request", method=method, path=path)
            response = await client.request(
                method,
                self._base_url + path,
                json=json,
                params=params,
                headers=self._build_headers(headers),
            )

        logger.debug("Received response", method=method, path=path, status=response.status_code)
        if response.is_success:
            return response.json()

        raise self._error_for(response)

    @staticmethod
    def _error_for(response: httpx.Response) -> ElephantasmError:
        detail: Optional[str] = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("detail"):
            detail = str(body["detail"])

        message = detail or response.reason_phrase
        logger.warning("API returned an error", status=response.status_code, detail=message)
        return exception_from_status(response.status_code, message)
