"""Tests for the Microcks access error taxonomy."""

import pytest

from microcks_mcp.domain.errors import (
    MicrocksAccessError,
    MicrocksForbiddenError,
    MicrocksUnauthorizedError,
    MicrocksUnknownAccessError,
    unexpected_error_message,
)


class TestAgentMessages:
    def test_unauthorized(self) -> None:
        msg = MicrocksUnauthorizedError().agent_message()
        assert "authentication" in msg
        assert "Do not retry" in msg

    def test_forbidden(self) -> None:
        msg = MicrocksForbiddenError().agent_message()
        assert "denied" in msg
        assert "Do not retry" in msg

    def test_unknown(self) -> None:
        msg = MicrocksUnknownAccessError().agent_message()
        assert "retry once" in msg
        assert "server status" in msg

    def test_unexpected(self) -> None:
        msg = unexpected_error_message(RuntimeError("secret detail"))
        assert "Unexpected" in msg
        assert "Do not retry" in msg
        assert "secret detail" not in msg


class TestCause:
    @pytest.mark.parametrize(
        "cls",
        [MicrocksUnauthorizedError, MicrocksForbiddenError, MicrocksUnknownAccessError],
    )
    def test_carries_cause(self, cls: type[MicrocksAccessError]) -> None:
        cause = ConnectionError("refused")
        exc = cls(cause)
        assert isinstance(exc, MicrocksAccessError)
        assert exc.cause is cause
        assert exc.__cause__ is cause

    def test_base_class_cannot_be_raised_bare(self) -> None:
        with pytest.raises(TypeError, match="concrete subclass"):
            MicrocksAccessError(RuntimeError("x"))

    def test_subclass_without_message_is_rejected(self) -> None:
        class Silent(MicrocksAccessError):
            pass

        with pytest.raises(TypeError):
            Silent()

    def test_str_is_agent_message(self) -> None:
        exc = MicrocksForbiddenError()
        assert str(exc) == exc.agent_message()

    def test_messages_are_distinct(self) -> None:
        messages = {
            MicrocksUnauthorizedError().agent_message(),
            MicrocksForbiddenError().agent_message(),
            MicrocksUnknownAccessError().agent_message(),
        }
        assert len(messages) == 3
