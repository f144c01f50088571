"""
Event type normalization.

The API only accepts the dot-notation values of `EventType`. Callers may also
pass the uppercase enum names (`TOOL_CALL`) in any letter casing.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Union

from elephantasm.core.exceptions import ValidationError
from elephantasm.infrastructure.models.event import EventType

VALID_EVENT_TYPES: FrozenSet[str] = frozenset(member.value for member in EventType)

EVENT_TYPE_ALIASES: Dict[str, str] = {member.name: member.value for member in EventType}


def resolve_event_type(event_type: Union[EventType, str]) -> str:
    """
    Resolve an event type token to the value the API accepts.

    Dot-notation values are matched exactly; alias names are matched
    case-insensitively ('Tool_Call' -> 'tool.call').

    Raises:
        ValidationError: the token is neither a valid value nor a known alias.
    """
    if isinstance(event_type, EventType):
        return event_type.value

    if event_type in VALID_EVENT_TYPES:
        return event_type

    alias = EVENT_TYPE_ALIASES.get(event_type.upper())
    if alias:
        return alias

    raise ValidationError(
        f"Invalid event_type '{event_type}'. "
        f"Valid values: {', '.join(sorted(VALID_EVENT_TYPES))}. "
        "Hint: use dot-notation strings (e.g. 'tool.call') or uppercase aliases (e.g. 'TOOL_CALL')."
    )
