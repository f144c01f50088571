"""
Exception definitions for the Elephantasm SDK.

Usage:
- Catch `ElephantasmError` to handle every SDK failure in one place.
- Branch on a subclass (`NotFoundError`, `RateLimitError`, ...) when the
  reaction depends on the kind of failure.
- `status_code` mirrors the HTTP status the API answered with; it is `None`
  for failures that never reached the server.
"""
from __future__ import annotations

from typing import Dict, Optional, Type


class ElephantasmError(Exception):
    status_code: Optional[int] = None
    code: str = "ELEPHANTASM_ERROR"
    message: str = "Elephantasm request failed."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        if message:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


# HTTP-backed errors
class AuthenticationError(ElephantasmError):
    status_code = 401
    code = "AUTHENTICATION_ERROR"
    message = "Invalid or missing API key"


class NotFoundError(ElephantasmError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found"


class ValidationError(ElephantasmError):
    status_code = 422
    code = "VALIDATION_ERROR"
    message = "Validation error"


class RateLimitError(ElephantasmError):
    status_code = 429
    code = "RATE_LIMITED"
    message = "Rate limit exceeded"


class ServerError(ElephantasmError):
    status_code = 500
    code = "SERVER_ERROR"
    message = "Server error"


# Caller-usage errors, raised before any request is sent
class ConfigurationError(ElephantasmError):
    code = "CONFIGURATION_ERROR"
    message = "Elephantasm client is misconfigured."


_STATUS_ERRORS: Dict[int, Type[ElephantasmError]] = {
    401: AuthenticationError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_from_status(status_code: int, message: Optional[str] = None) -> ElephantasmError:
    """Build the taxonomy error matching an HTTP status code."""

    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is not None:
        return error_cls(message)
    if status_code >= 500:
        return ServerError(message)
    return ElephantasmError(message, status_code=status_code)


__all__ = [
    "ElephantasmError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "ServerError",
    "ConfigurationError",
    "exception_from_status",
]
