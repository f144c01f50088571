"""Wire payloads exchanged with the Elephantasm API."""

from .anima import Anima, AnimaCreate
from .event import Event, EventCreate, EventType
from .memory_pack import (
    IdentityContext,
    Memory,
    MemoryPack,
    MemoryPackContent,
    MemoryState,
    ScoredKnowledge,
    ScoredMemory,
    TemporalContext,
)

__all__ = [
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
