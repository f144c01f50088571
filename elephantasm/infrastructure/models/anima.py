"""Anima (agent entity) payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel


class Anima(BaseModel):
    """Agent entity that owns memories and events."""

    id: str
    name: str
    description: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "allow"}


class AnimaCreate(BaseModel):
    """Request body for creating an anima; `to_payload()` sends only the set fields."""

    name: str
    description: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None

    def to_payload(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields if name in self.model_fields_set}
