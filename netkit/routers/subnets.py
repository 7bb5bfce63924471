"""Subnet calculation endpoints.

Accepts an IPv4 address plus a subnet size in any of these shapes:
- GET ?q=192.168.1.10/24
- GET ?ip=192.168.1.10&mask=255.255.255.0 (or &cidr=24)
- POST JSON {"q": ".../24"}, {"ip", "mask"} or {"ip", "cidr"}
"""

import logging

from fastapi import APIRouter, HTTPException, status

from ..ipv4 import SubnetError, calculate
from ..models.subnet import SubnetCalcRequest, SubnetCalcResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["subnets"])


def _calculate_or_400(
    q: str | None, ip: str | None, cidr: int | str | None, mask: str | None
) -> SubnetCalcResponse:
    """Run the calculator and turn a rejection into an HTTP 400."""
    result = calculate(q=q, ip=ip, cidr=cidr, mask=mask)

    if isinstance(result, SubnetError):
        logger.debug(
            "Subnet calculation rejected",
            extra={"kind": result.kind.value, "q": q, "ip": ip, "cidr": cidr, "mask": mask},
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)

    return SubnetCalcResponse.from_result(result)


@router.get("/subnet-calc", response_model=SubnetCalcResponse)
async def subnet_calc(
    q: str | None = None,
    ip: str | None = None,
    mask: str | None = None,
    cidr: str | None = None,
):
    """Calculate IPv4 subnet details from query parameters.

    Later fields override earlier ones: ``q`` < ``ip`` < ``cidr``/``mask``,
    and ``cidr`` wins over ``mask``.

    Raises:
        HTTPException: 400 if the address, prefix or mask is missing or invalid
    """
    return _calculate_or_400(q=q, ip=ip, cidr=cidr, mask=mask)


@router.post("/subnet-calc", response_model=SubnetCalcResponse)
async def subnet_calc_post(
    request: SubnetCalcRequest | None = None,
    q: str | None = None,
    ip: str | None = None,
    mask: str | None = None,
    cidr: str | None = None,
):
    """Calculate IPv4 subnet details from a JSON body.

    Query parameters are still honoured and take priority over body fields
    of the same name.

    Args:
        request: Optional JSON body with q, ip, mask and/or cidr
        q, ip, mask, cidr: Optional query parameter overrides

    Returns:
        Subnet details

    Raises:
        HTTPException: 400 if the address, prefix or mask is missing or invalid
    """
    body = request or SubnetCalcRequest()

    return _calculate_or_400(
        q=q or body.q,
        ip=ip or body.ip,
        cidr=cidr if cidr not in (None, "") else body.cidr,
        mask=mask or body.mask,
    )
