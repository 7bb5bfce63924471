"""Well-known port lookup endpoints.

Accepted inputs:
- GET ?q=443, ?q=80,443,22, ?q=https or ?q=http,https,ssh
- GET ?port=443&protocol=tcp
- POST JSON {"q": "80,443"}, {"ports": [80, 443]} or {"services": ["https", "ssh"]}
"""

from fastapi import APIRouter, HTTPException, status

from ..models.ports import PortEntryModel, PortLookupRequest, PortLookupResponse
from ..ports import build_queries, parse_protocol, search_ports

router = APIRouter(prefix="/api", tags=["ports"])

USAGE = {
    "error": 'Provide q (e.g., "80,443,https") or port=NUM or POST { ports: [...], services: [...] }',
    "examples": [
        "/api/port-lookup?q=443",
        "/api/port-lookup?q=http,https,ssh",
        "/api/port-lookup?port=3389&protocol=tcp",
    ],
}


def _lookup(
    q: str | None,
    port: str | int | None,
    protocol: str | None,
    ports: list | None = None,
    services: list | None = None,
) -> PortLookupResponse:
    queries = build_queries(q=q, port=port, ports=ports, services=services)
    if not queries:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USAGE)

    filtered_protocol = parse_protocol(protocol)
    results = search_ports(queries, filtered_protocol)

    return PortLookupResponse(
        results=[PortEntryModel.model_validate(entry) for entry in results],
        count=len(results),
        filtered_protocol=filtered_protocol,
    )


@router.get("/port-lookup", response_model=PortLookupResponse)
async def port_lookup(
    q: str | None = None,
    port: str | None = None,
    protocol: str | None = None,
):
    """Look up well-known ports and services.

    Raises:
        HTTPException: 400 if no port or service was supplied
    """
    return _lookup(q=q, port=port, protocol=protocol)


@router.post("/port-lookup", response_model=PortLookupResponse)
async def port_lookup_post(
    request: PortLookupRequest | None = None,
    q: str | None = None,
    port: str | None = None,
    protocol: str | None = None,
):
    """Look up well-known ports and services from a JSON body.

    The ``q`` and ``protocol`` query parameters take priority over the body.

    Raises:
        HTTPException: 400 if no port or service was supplied
    """
    body = request or PortLookupRequest()

    return _lookup(
        q=q or body.q,
        port=port,
        protocol=protocol or body.protocol,
        ports=body.ports,
        services=body.services,
    )
