"""Service summary — the flattened public view of a Microcks service."""

from __future__ import annotations

from pydantic import BaseModel


class ServiceSummary(BaseModel):
    """Essential information an agent needs to discover a mock service.

    Field order is the serialization order: ``id``, ``name``, ``version``, ``type``.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    version: str
    type: str
