"""HTTP adapter implementing :class:`MicrocksServicesPort` over the REST client."""

from __future__ import annotations

import structlog

from microcks_mcp.domain.models import ServiceSummary
from microcks_mcp.infrastructure.client import MicrocksApiClient, MicrocksApiError, Service
from microcks_mcp.infrastructure.errors import map_api_error
from microcks_mcp.services.ports import MicrocksServicesPort

log = structlog.get_logger(__name__)


class MicrocksHttpAdapter(MicrocksServicesPort):
    """Reads services from a Microcks instance over HTTP.

    The API client is built once at startup and shared by every call;
    it holds no per-request state.
    """

    def __init__(self, api: MicrocksApiClient) -> None:
        self._api = api

    @classmethod
    def from_base_url(cls, base_url: str) -> MicrocksHttpAdapter:
        """Build the adapter and its client for the Microcks server at *base_url*."""
        log.info("microcks.client.init", api_url=f"{base_url.rstrip('/')}/api")
        return cls(MicrocksApiClient(base_url))

    def list_all_services(self) -> list[ServiceSummary]:
        """Retrieve all services; raises a categorized MicrocksAccessError on failure."""
        log.debug("microcks.services.fetch")
        try:
            services = self._api.get_services()
        except MicrocksApiError as exc:
            log.debug("microcks.services.failed", status_code=exc.status_code)
            raise map_api_error(exc) from exc
        return [to_service_summary(s) for s in services]


def to_service_summary(service: Service) -> ServiceSummary:
    """Convert a remote Service to the domain summary."""
    return ServiceSummary(
        id=service.id,
        name=service.name,
        version=service.version,
        type=str(service.type),
    )
