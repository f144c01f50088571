"""Event payloads captured for memory synthesis."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class EventType(str, Enum):
    """Event types accepted by the API."""

    MESSAGE_IN = "message.in"
    MESSAGE_OUT = "message.out"
    TOOL_CALL = "tool.call"
    TOOL_RESULT = "tool.result"
    SYSTEM = "system"


class Event(BaseModel):
    """Atomic unit of experience (message, tool call, ...)."""

    id: str
    anima_id: str
    event_type: str
    content: str
    role: Optional[str] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    occurred_at: Optional[datetime] = None
    session_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    source_uri: Optional[str] = None
    dedupe_key: Optional[str] = None
    importance_score: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "allow"}


class EventCreate(BaseModel):
    """
    Request body for capturing an event.

    The client builds it with `model_construct`, so values reach the server
    as given and the server does the validating. `to_payload()` leaves out
    optional fields that were never set instead of sending them as null.
    """

    anima_id: str
    event_type: str
    content: str
    role: Optional[str] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    occurred_at: Optional[str] = None
    session_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    source_uri: Optional[str] = None
    dedupe_key: Optional[str] = None
    importance_score: Optional[float] = None

    def to_payload(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields if name in self.model_fields_set}
