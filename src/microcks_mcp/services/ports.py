"""Driven ports — contracts the infrastructure layer implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from microcks_mcp.domain.models import ServiceSummary


class MicrocksServicesPort(ABC):
    """Access to the services registered in a Microcks instance."""

    @abstractmethod
    def list_all_services(self) -> list[ServiceSummary]:
        """Retrieve all available services from Microcks.

        Raises:
            MicrocksAccessError: if Microcks cannot be accessed.
        """
