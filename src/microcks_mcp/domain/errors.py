"""Microcks access errors — a closed, three-way taxonomy.

Each variant renders its own agent message with retry guidance:

- :class:`MicrocksUnauthorizedError` — HTTP 401, do not retry
- :class:`MicrocksForbiddenError` — HTTP 403, do not retry
- :class:`MicrocksUnknownAccessError` — anything else, retry once
"""

from __future__ import annotations


class MicrocksAccessError(Exception):
    """Base for categorized failures accessing Microcks.

    Not raised directly; use one of the three subclasses.
    """

    agent_message_text: str = ""

    def __init__(self, cause: BaseException | None = None) -> None:
        if not self.agent_message_text:
            msg = f"{type(self).__name__} has no agent message; raise a concrete subclass"
            raise TypeError(msg)
        super().__init__(self.agent_message_text)
        self.cause = cause
        self.__cause__ = cause

    def agent_message(self) -> str:
        """Return the error message formatted for AI agents with action guidance."""
        return self.agent_message_text


class MicrocksUnauthorizedError(MicrocksAccessError):
    """Credentials are missing or invalid (HTTP 401)."""

    agent_message_text = (
        "Microcks authentication failed. "
        "The credentials are missing or invalid. "
        "Do not retry. Ask the user to check the Microcks credentials configuration."
    )


class MicrocksForbiddenError(MicrocksAccessError):
    """Credentials are valid but lack permissions (HTTP 403)."""

    agent_message_text = (
        "Microcks access denied. "
        "The credentials are valid but lack required permissions. "
        "Do not retry. Ask the user to request access from the Microcks administrator."
    )


class MicrocksUnknownAccessError(MicrocksAccessError):
    """Any other failure: unexpected status, network error, undetermined cause."""

    agent_message_text = (
        "Failed to connect to Microcks server. "
        "This may be a network issue or the server may be down. "
        "You may retry once. If it still fails, ask the user to check the server status."
    )


def unexpected_error_message(exc: BaseException) -> str:
    """Message for failures that are not access problems, i.e. likely bugs.

    The exception detail never appears in the returned text;
    callers log it alongside the traceback.
    """
    return "Unexpected internal error. Do not retry. This is likely a bug - report this issue."
