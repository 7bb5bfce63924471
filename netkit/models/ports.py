"""Pydantic models for the port lookup API."""

from pydantic import BaseModel, ConfigDict, Field

from ..ports import Protocol


class PortLookupRequest(BaseModel):
    """Request body for POST /api/port-lookup."""

    q: str | None = Field(default=None, description="Ports and/or services, e.g. 80,443,https")
    ports: list = Field(default_factory=list, description="Port numbers to look up")
    services: list = Field(default_factory=list, description="Service names to look up")
    protocol: str | None = Field(default=None, description="tcp, udp or both (default)")


class PortEntryModel(BaseModel):
    """A single port table row (or placeholder for a miss)."""

    model_config = ConfigDict(from_attributes=True)

    port: int
    protocol: Protocol
    service: str
    description: str
    common: bool = False


class PortLookupResponse(BaseModel):
    """Response model for a port lookup."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[PortEntryModel]
    count: int
    filtered_protocol: Protocol = Field(alias="filteredProtocol")
