"""Microcks REST API client.

Thin synchronous wrapper over :class:`httpx.Client` for the parts of the
Microcks API this project consumes. Transport failures and malformed
bodies surface as :class:`MicrocksApiError`; ``status_code`` is None when
no response was received (connection refused, DNS failure, timeout).

Usage::

    api = MicrocksApiClient("http://localhost:8080")
    services = api.get_services()
"""

from __future__ import annotations

from enum import StrEnum

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

API_PATH = "/api"


class ServiceType(StrEnum):
    """Service types known to Microcks."""

    REST = "REST"
    SOAP_HTTP = "SOAP_HTTP"
    GENERIC_REST = "GENERIC_REST"
    GENERIC_EVENT = "GENERIC_EVENT"
    EVENT = "EVENT"
    GRPC = "GRPC"
    GRAPHQL = "GRAPHQL"


class Service(BaseModel):
    """Remote representation of a Microcks service.

    Only the fields this project reads are declared; the rest of the
    payload (operations, metadata, source artifact) is ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    name: str
    version: str
    type: ServiceType


_SERVICES = TypeAdapter(list[Service])


class MicrocksApiError(Exception):
    """Transport-level failure talking to the Microcks API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class MicrocksApiClient:
    """Client for the Microcks REST API rooted at ``{base_url}/api``.

    Attributes:
        base_url: Microcks server URL without the ``/api`` suffix.
    """

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url + API_PATH,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def _get(self, path: str) -> httpx.Response:
        try:
            response = self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise MicrocksApiError(
                f"GET {path} returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
                body=exc.response.text,
            ) from exc
        except httpx.RequestError as exc:
            raise MicrocksApiError(f"GET {path} failed: {exc}") from exc

        return response

    def get_services(self) -> list[Service]:
        """``GET /services``: every service registered in Microcks.

        A body that is not JSON, or does not match the service schema,
        raises MicrocksApiError with the response status.
        """
        response = self._get("/services")
        try:
            return _SERVICES.validate_json(response.content)
        except ValidationError as exc:
            raise MicrocksApiError(
                f"GET /services returned an unexpected body: {exc.error_count()} errors",
                status_code=response.status_code,
                body=response.text,
            ) from exc
