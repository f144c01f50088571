"""Shared default client used by the module-level convenience functions."""

import threading
from typing import Optional

from elephantasm.core.logger import get_logger
from elephantasm.services.client import Elephantasm

logger = get_logger(__name__)

_default_client: Optional[Elephantasm] = None
_default_client_lock = threading.Lock()


def get_client() -> Elephantasm:
    """Provide a singleton client configured from the environment."""

    global _default_client
    if _default_client is not None:
        return _default_client

    with _default_client_lock:
        if _default_client is None:
            _default_client = Elephantasm()
            logger.debug("Default Elephantasm client created")
    return _default_client


def reset_client() -> None:
    """Drop the default client so the next call re-reads the environment."""

    global _default_client
    with _default_client_lock:
        _default_client = None
