"""Shared pytest fixtures and test helpers for microcks-mcp tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from microcks_mcp.domain.models import ServiceSummary
from microcks_mcp.services.list_services import ListServicesService
from microcks_mcp.services.ports import MicrocksServicesPort


class FakeServicesPort(MicrocksServicesPort):
    """Port double: returns canned services or raises a canned exception."""

    def __init__(
        self,
        services: list[ServiceSummary] | None = None,
        *,
        raises: Exception | None = None,
    ) -> None:
        self.services = services if services is not None else []
        self.raises = raises
        self.calls = 0

    def list_all_services(self) -> list[ServiceSummary]:
        self.calls += 1
        if self.raises is not None:
            raise self.raises
        return self.services


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def petstore() -> ServiceSummary:
    return ServiceSummary(id="id1", name="Petstore API", version="1.0.0", type="REST")


@pytest.fixture
def sample_services(petstore: ServiceSummary) -> list[ServiceSummary]:
    """Three services of mixed types, in a non-sorted order."""
    return [
        ServiceSummary(id="id3", name="User API", version="2.1.0", type="REST"),
        petstore,
        ServiceSummary(id="id2", name="Order Events", version="0.9.0", type="EVENT"),
    ]


@pytest.fixture
def make_use_case():
    """Build a ListServicesService over a FakeServicesPort."""

    def _make(
        services: list[ServiceSummary] | None = None,
        *,
        raises: Exception | None = None,
    ) -> tuple[ListServicesService, FakeServicesPort]:
        port = FakeServicesPort(services, raises=raises)
        return ListServicesService(port), port

    return _make


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    """Keep tests independent of any real microcks-mcp.toml or env overrides."""
    empty = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(empty)
    monkeypatch.delenv("MICROCKS_MCP_CONFIG", raising=False)
    monkeypatch.delenv("MICROCKS_MCP_MICROCKS__API_URL", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore logger state changed by configure_logging (CLI tests call it)."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("microcks_mcp")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
