"""Maps Microcks client exceptions to domain access errors.

Pure functions: same input, same category, no side effects.
"""

from __future__ import annotations

from microcks_mcp.domain.errors import (
    MicrocksAccessError,
    MicrocksForbiddenError,
    MicrocksUnauthorizedError,
    MicrocksUnknownAccessError,
)
from microcks_mcp.infrastructure.client import MicrocksApiError

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403


def category_for_status(status_code: int | None) -> type[MicrocksAccessError]:
    """Return the access error class for an HTTP status (None = no response)."""
    if status_code == HTTP_UNAUTHORIZED:
        return MicrocksUnauthorizedError
    if status_code == HTTP_FORBIDDEN:
        return MicrocksForbiddenError
    return MicrocksUnknownAccessError


def map_api_error(exc: MicrocksApiError) -> MicrocksAccessError:
    """Map a client error to a domain error based on its HTTP status code."""
    return category_for_status(exc.status_code)(exc)


def map_exception(exc: Exception) -> MicrocksAccessError:
    """Map any other exception to an unknown access error."""
    return MicrocksUnknownAccessError(exc)
