"""Pydantic models for the subnet calculator API."""

from pydantic import BaseModel, ConfigDict, Field

from ..ipv4 import SubnetResult


class SubnetCalcRequest(BaseModel):
    """Request body for POST /api/subnet-calc.

    Any of the accepted shapes: ``q`` alone, ``ip`` + ``cidr`` or ``ip`` + ``mask``.
    """

    q: str | None = Field(default=None, description="Address and prefix, e.g. 192.168.1.10/24")
    ip: str | None = Field(default=None, description="IPv4 address, e.g. 192.168.1.10")
    mask: str | None = Field(default=None, description="Dotted subnet mask, e.g. 255.255.255.0")
    cidr: int | None = Field(default=None, description="CIDR prefix length (0-32)")


class SubnetInput(BaseModel):
    """Normalized input echoed back with the result."""

    ip: str
    mask: str
    cidr: int


class SubnetBits(BaseModel):
    """Grouped 32-bit binary renderings."""

    ip: str
    mask: str
    network: str
    broadcast: str


class SubnetCalcResponse(BaseModel):
    """Response model for an IPv4 subnet calculation."""

    model_config = ConfigDict(populate_by_name=True)

    input: SubnetInput
    network: str
    broadcast: str
    first_host: str = Field(alias="firstHost")
    last_host: str = Field(alias="lastHost")
    host_count: int = Field(alias="hostCount")
    wildcard_mask: str = Field(alias="wildcardMask")
    address_class: str = Field(alias="class")
    is_private: bool = Field(alias="isPrivate")
    bits: SubnetBits

    @classmethod
    def from_result(cls, result: SubnetResult) -> "SubnetCalcResponse":
        return cls(
            input=SubnetInput(ip=result.ip, mask=result.mask, cidr=result.cidr),
            network=result.network,
            broadcast=result.broadcast,
            first_host=result.first_host,
            last_host=result.last_host,
            host_count=result.host_count,
            wildcard_mask=result.wildcard_mask,
            address_class=result.address_class,
            is_private=result.is_private,
            bits=SubnetBits(
                ip=result.ip_bits,
                mask=result.mask_bits,
                network=result.network_bits,
                broadcast=result.broadcast_bits,
            ),
        )
