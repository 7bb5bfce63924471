"""Well-known port lookup.

A small, high-signal table of common TCP/UDP assignments and the matching
rules used by the port lookup endpoint. Queries are either port numbers or
service names; anything that is not found still produces a placeholder entry
so callers can see which tokens missed.
"""

import re
from dataclasses import dataclass
from enum import Enum

MAX_PORT = 65535

TOKEN_SPLIT_RE = re.compile(r"[,\s]+")
PORT_RE = re.compile(r"^-?[0-9]{1,10}$")


class Protocol(str, Enum):
    """Transport protocol filter. BOTH matches either protocol."""

    TCP = "tcp"
    UDP = "udp"
    BOTH = "both"


@dataclass(frozen=True)
class PortEntry:
    port: int
    protocol: Protocol
    service: str
    description: str
    common: bool = False


@dataclass(frozen=True)
class PortQuery:
    """A single lookup token: a port number or a lowercase service name."""

    port: int | None = None
    service: str | None = None
    protocol: Protocol = Protocol.BOTH


TCP, UDP = Protocol.TCP, Protocol.UDP

PORT_TABLE: tuple[PortEntry, ...] = (
    # Core
    PortEntry(20, TCP, "ftp-data", "FTP data", common=True),
    PortEntry(21, TCP, "ftp", "FTP control", common=True),
    PortEntry(22, TCP, "ssh", "Secure Shell remote login", common=True),
    PortEntry(23, TCP, "telnet", "Telnet (unencrypted remote login)"),
    PortEntry(25, TCP, "smtp", "Simple Mail Transfer"),
    PortEntry(53, UDP, "dns", "Domain Name System (queries)", common=True),
    PortEntry(53, TCP, "dns", "Domain Name System (zone transfers/DoT)"),
    PortEntry(67, UDP, "dhcp", "DHCP server"),
    PortEntry(68, UDP, "dhcp", "DHCP client"),
    PortEntry(69, UDP, "tftp", "Trivial File Transfer"),
    PortEntry(80, TCP, "http", "HyperText Transfer Protocol", common=True),
    PortEntry(110, TCP, "pop3", "Post Office Protocol v3"),
    PortEntry(123, UDP, "ntp", "Network Time Protocol", common=True),
    PortEntry(135, TCP, "msrpc", "Microsoft RPC endpoint mapper"),
    PortEntry(137, UDP, "netbios-ns", "NetBIOS Name Service"),
    PortEntry(138, UDP, "netbios-dgm", "NetBIOS Datagram Service"),
    PortEntry(139, TCP, "netbios-ssn", "NetBIOS Session Service"),
    PortEntry(143, TCP, "imap", "IMAP (mail access)"),
    PortEntry(161, UDP, "snmp", "SNMP (management)"),
    PortEntry(162, UDP, "snmptrap", "SNMP traps"),
    PortEntry(389, TCP, "ldap", "Lightweight Directory Access Protocol"),
    PortEntry(443, TCP, "https", "HTTP over TLS/SSL", common=True),
    PortEntry(445, TCP, "microsoft-ds", "SMB over TCP", common=True),
    PortEntry(465, TCP, "smtps", "SMTP over TLS"),
    PortEntry(514, UDP, "syslog", "Syslog (legacy)"),
    PortEntry(515, TCP, "printer", "Line Printer Daemon"),
    PortEntry(587, TCP, "submission", "Mail submission (STARTTLS)", common=True),
    PortEntry(636, TCP, "ldaps", "LDAP over TLS"),
    PortEntry(873, TCP, "rsync", "rsync file sync"),
    PortEntry(993, TCP, "imaps", "IMAP over TLS"),
    PortEntry(995, TCP, "pop3s", "POP3 over TLS"),
    # Remote management and VPN
    PortEntry(500, UDP, "isakmp", "IPsec IKE"),
    PortEntry(1701, UDP, "l2tp", "Layer 2 Tunneling Protocol"),
    PortEntry(1723, TCP, "pptp", "Point-to-Point Tunneling Protocol"),
    PortEntry(3389, TCP, "rdp", "Remote Desktop Protocol", common=True),
    # Web and dev
    PortEntry(8080, TCP, "http-alt", "HTTP alternate/Proxies"),
    PortEntry(8443, TCP, "https-alt", "HTTPS alternate"),
    # Databases
    PortEntry(1433, TCP, "mssql", "Microsoft SQL Server"),
    PortEntry(1521, TCP, "oracle", "Oracle DB listener"),
    PortEntry(3306, TCP, "mysql", "MySQL"),
    PortEntry(5432, TCP, "postgres", "PostgreSQL"),
    PortEntry(27017, TCP, "mongodb", "MongoDB"),
    # Web apps
    PortEntry(8081, TCP, "http-alt-1", "HTTP alternate"),
    PortEntry(9000, TCP, "svc-http", "Common app/console port"),
    # Email alternates
    PortEntry(2525, TCP, "smtp-alt", "Alternative SMTP (esp. cloud providers)"),
    # DNS over TLS/QUIC
    PortEntry(853, TCP, "dot", "DNS over TLS"),
    PortEntry(853, UDP, "doq", "DNS over QUIC"),
)


def parse_protocol(value: str | None) -> Protocol:
    """Normalise a protocol filter; anything other than tcp/udp means BOTH."""
    if value and value.strip().lower() in (Protocol.TCP.value, Protocol.UDP.value):
        return Protocol(value.strip().lower())
    return Protocol.BOTH


def parse_port(value) -> int | None:
    """Return ``value`` as an int if it is integral, otherwise None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        value = value.strip()
        return int(value) if PORT_RE.match(value) else None
    return None


def parse_port_query(text: str) -> list[PortQuery]:
    """Split free text such as ``"80,443 https"`` into lookup queries.

    Tokens are separated by commas and/or whitespace and lowercased. Integers
    in 0-65535 become port queries; every other token is a service name.
    """
    queries = []
    for token in TOKEN_SPLIT_RE.split(text.strip().lower()):
        if not token:
            continue
        port = parse_port(token)
        if port is not None and 0 <= port <= MAX_PORT:
            queries.append(PortQuery(port=port, protocol=Protocol.BOTH))
        else:
            queries.append(PortQuery(service=token))
    return queries


def search_ports(queries: list[PortQuery], protocol: Protocol | None = None) -> list[PortEntry]:
    """Resolve each query against PORT_TABLE, keeping query order.

    Args:
        queries: Parsed port or service queries
        protocol: Optional filter applied on top of each query's own protocol

    Returns:
        Matching entries. A query with no match contributes one placeholder
        entry (service "unknown" for ports, port -1 for services).
    """
    results: list[PortEntry] = []
    for query in queries:
        effective = protocol or query.protocol
        if query.port is not None:
            hits = [
                entry
                for entry in PORT_TABLE
                if entry.port == query.port and (effective == Protocol.BOTH or entry.protocol == effective)
            ]
            if hits:
                results.extend(hits)
            else:
                results.append(PortEntry(query.port, effective, "unknown", "No known assignment"))
        elif query.service:
            hits = [
                entry
                for entry in PORT_TABLE
                if entry.service.lower() == query.service
                and (protocol is None or protocol == Protocol.BOTH or entry.protocol == protocol)
            ]
            if hits:
                results.extend(hits)
            else:
                results.append(
                    PortEntry(-1, protocol or Protocol.BOTH, query.service, "No known port in local table")
                )
    return results


def build_queries(
    q: str | None = None,
    port: str | int | None = None,
    ports: list | None = None,
    services: list | None = None,
) -> list[PortQuery]:
    """Collect queries from every accepted input, in a fixed order.

    ``q`` tokens come first, then ``port``, then each of ``ports`` and
    ``services``. Non-integral ports and blank service names are skipped.
    """
    queries: list[PortQuery] = []

    if q:
        queries.extend(parse_port_query(q))

    if port is not None and port != "":
        parsed = parse_port(port)
        if parsed is not None:
            queries.append(PortQuery(port=parsed))

    for item in ports or []:
        parsed = parse_port(item)
        if parsed is not None:
            queries.append(PortQuery(port=parsed))

    for item in services or []:
        if isinstance(item, str) and item.strip():
            queries.append(PortQuery(service=item.strip().lower()))

    return queries
