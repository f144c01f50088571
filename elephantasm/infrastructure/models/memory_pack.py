"""Memory pack payloads returned for context injection."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class MemoryState(str, Enum):
    """Lifecycle states for memory recall and curation."""

    ACTIVE = "active"
    DECAYING = "decaying"
    ARCHIVED = "archived"


class Memory(BaseModel):
    """Subjective interpretation of events, as stored by the server."""

    id: str
    anima_id: Optional[str] = None
    content: Optional[str] = None
    summary: Optional[str] = None
    importance: Optional[float] = None
    confidence: Optional[float] = None
    state: Optional[MemoryState] = None
    recency_score: Optional[float] = None
    decay_score: Optional[float] = None
    time_start: Optional[datetime] = None
    time_end: Optional[datetime] = None
    meta: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "allow"}


class ScoredMemory(BaseModel):
    """Memory with scoring breakdown from pack compilation."""

    id: str
    summary: Optional[str] = None
    score: Optional[float] = None
    reason: Optional[str] = None
    breakdown: Optional[Dict[str, float]] = None
    similarity: Optional[float] = None

    model_config = {"extra": "allow"}


class ScoredKnowledge(BaseModel):
    """Knowledge item with similarity score from pack compilation."""

    id: str
    content: Optional[str] = None
    type: Optional[str] = None
    score: Optional[float] = None
    similarity: Optional[float] = None

    model_config = {"extra": "allow"}


class TemporalContext(BaseModel):
    """Temporal awareness context for bridging session gaps."""

    last_event_at: Optional[datetime] = None
    hours_ago: Optional[float] = None
    memory_summary: Optional[str] = None
    formatted: Optional[str] = None

    model_config = {"extra": "allow"}


class IdentityContext(BaseModel):
    """Identity layer context from pack compilation."""

    personality_type: Optional[str] = None
    communication_style: Optional[str] = None
    self_reflection: Optional[Dict[str, Any]] = None
    prose: Optional[str] = None

    model_config = {"extra": "allow"}


class MemoryPackContent(BaseModel):
    """Content structure within a memory pack; every field may be missing."""

    context: Optional[str] = None
    identity: Optional[IdentityContext] = None
    session_memories: Optional[List[ScoredMemory]] = None
    knowledge: Optional[List[ScoredKnowledge]] = None
    long_term_memories: Optional[List[ScoredMemory]] = None
    temporal_context: Optional[TemporalContext] = None

    model_config = {"extra": "allow"}


def _content_of(pack: "MemoryPack") -> MemoryPackContent:
    return pack.content or MemoryPackContent()


class MemoryPack(BaseModel):
    """
    Compiled memory pack for LLM context injection.

    Counts and token figures are reported by the server; the accessors below
    only project `content` and never recompute anything. They tolerate a
    missing or null `content` as well as missing individual fields.
    """

    id: str
    anima_id: Optional[str] = None
    query: Optional[str] = None
    preset_name: Optional[str] = None
    session_memory_count: Optional[int] = None
    knowledge_count: Optional[int] = None
    long_term_memory_count: Optional[int] = None
    has_identity: Optional[bool] = None
    token_count: Optional[int] = None
    max_tokens: Optional[int] = None
    content: Optional[MemoryPackContent] = None
    compiled_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"extra": "allow"}

    def as_prompt(self) -> str:
        """Return the formatted context string for LLM injection."""
        return _content_of(self).context or ""

    def get_identity(self) -> Optional[IdentityContext]:
        return _content_of(self).identity

    def get_session_memories(self) -> List[ScoredMemory]:
        return list(_content_of(self).session_memories or [])

    def get_knowledge(self) -> List[ScoredKnowledge]:
        return list(_content_of(self).knowledge or [])

    def get_long_term_memories(self) -> List[ScoredMemory]:
        return list(_content_of(self).long_term_memories or [])

    def get_temporal_context(self) -> Optional[TemporalContext]:
        return _content_of(self).temporal_context
