"""BaseService — abstract foundation for microcks-mcp use cases.

Every service receives its port at construction time. Services never
build infrastructure themselves; the composition root (``mcp.server``
or the CLI) wires the concrete adapter in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from microcks_mcp.services.ports import MicrocksServicesPort


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ListServicesService(BaseService):
            def list_all_services(self) -> Result[list[ServiceSummary]]:
                services = self._port.list_all_services()
                ...
    """

    def __init__(self, port: MicrocksServicesPort) -> None:
        self._port = port
