"""List-services use case.

Returns a Result holding either the services, verbatim from the port,
or an AI-friendly error message with retry/abandon guidance.
"""

from __future__ import annotations

import logging

from microcks_mcp.domain.errors import MicrocksAccessError, unexpected_error_message
from microcks_mcp.domain.models import ServiceSummary
from microcks_mcp.domain.result import Result, error, success
from microcks_mcp.services.base import BaseService

logger = logging.getLogger(__name__)


class ListServicesService(BaseService):
    """List all services available in the connected Microcks instance."""

    def list_all_services(self) -> Result[list[ServiceSummary]]:
        """Call the port once; never raises.

        No filtering, sorting or pagination: order and contents are the port's.
        """
        logger.debug("Listing all services")

        try:
            services = self._port.list_all_services()
        except MicrocksAccessError as exc:
            logger.error("Microcks access failed: %s", type(exc).__name__, exc_info=True)
            return error(exc.agent_message())
        except Exception as exc:
            logger.error("Unexpected error listing services: %s", exc, exc_info=True)
            return error(unexpected_error_message(exc))

        logger.debug("Retrieved %d services", len(services))
        return success(services)
