"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``. The Microcks adapter is built lazily so ``--help``
and ``--version`` never open an HTTP client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from microcks_mcp.config.logging import configure_logging

if TYPE_CHECKING:
    from microcks_mcp.config.settings import MicrocksSettings
    from microcks_mcp.services.list_services import ListServicesService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: MicrocksSettings) -> None:
        self.settings = settings
        self._list_services: ListServicesService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def list_services(self) -> ListServicesService:
        """The list-services use case wired to the HTTP adapter."""
        if self._list_services is None:
            from microcks_mcp.infrastructure.http_adapter import MicrocksHttpAdapter
            from microcks_mcp.services.list_services import ListServicesService

            adapter = MicrocksHttpAdapter.from_base_url(self.settings.microcks.api_url)
            self._list_services = ListServicesService(adapter)
        return self._list_services
