"""
Unit tests for event type normalization.

Covers dot-notation passthrough, uppercase alias resolution in any casing,
and the error raised for unknown tokens.
"""

import pytest

from elephantasm import EventType, ValidationError, resolve_event_type

CANONICAL = ["message.in", "message.out", "tool.call", "tool.result", "system"]
ALIASES = {
    "MESSAGE_IN": "message.in",
    "MESSAGE_OUT": "message.out",
    "TOOL_CALL": "tool.call",
    "TOOL_RESULT": "tool.result",
    "SYSTEM": "system",
}


class TestDotNotation:
    """Canonical values pass through unchanged."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", CANONICAL)
    def test_passthrough(self, value):
        assert resolve_event_type(value) == value

    @pytest.mark.unit
    @pytest.mark.parametrize("member", list(EventType))
    def test_enum_member_resolves_to_value(self, member):
        assert resolve_event_type(member) == member.value

    @pytest.mark.unit
    def test_canonical_path_is_case_sensitive(self):
        """Uppercased dot-notation is neither canonical nor an alias."""
        with pytest.raises(ValidationError):
            resolve_event_type("MESSAGE.IN")


class TestAliases:
    """Uppercase enum names resolve case-insensitively."""

    @pytest.mark.unit
    @pytest.mark.parametrize("alias,expected", sorted(ALIASES.items()))
    def test_uppercase_alias(self, alias, expected):
        assert resolve_event_type(alias) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("alias,expected", sorted(ALIASES.items()))
    def test_lowercase_alias(self, alias, expected):
        assert resolve_event_type(alias.lower()) == expected

    @pytest.mark.unit
    def test_mixed_case_alias(self):
        assert resolve_event_type("Tool_Call") == "tool.call"
        assert resolve_event_type("mEsSaGe_OuT") == "message.out"


class TestInvalidTokens:
    """Unknown tokens raise ValidationError with a helpful message."""

    @pytest.mark.unit
    @pytest.mark.parametrize("token", ["invalid", "", "TOOL_CALL_EXTRA", "tool call", "message"])
    def test_rejected(self, token):
        with pytest.raises(ValidationError):
            resolve_event_type(token)

    @pytest.mark.unit
    def test_message_lists_valid_values_and_hint(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_event_type("bad")

        message = str(exc_info.value)
        assert "Invalid event_type 'bad'" in message
        for value in CANONICAL:
            assert value in message
        assert "Valid values: message.in, message.out, system, tool.call, tool.result." in message
        assert "Hint" in message

    @pytest.mark.unit
    def test_error_carries_validation_status(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_event_type("nope")
        assert exc_info.value.status_code == 422
