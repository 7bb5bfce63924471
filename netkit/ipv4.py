"""IPv4 subnet arithmetic.

Pure helpers behind the subnet calculator endpoint. Addresses and masks are
handled as unsigned 32-bit integers; every result that could overflow is
masked with ``MAX_IPV4`` so no bits leak past 32.

Bad input never raises here. Parsers return ``None`` and the entry points
return a ``SubnetError`` instead of a ``SubnetResult``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from ipaddress import IPv4Address, ip_network

MAX_IPV4 = 0xFFFFFFFF

DOTTED_QUAD_RE = re.compile(r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})$")
# 0-32 never needs more than two digits
PREFIX_RE = re.compile(r"^[0-9]{1,2}$")

# RFC1918 Private Address Ranges
RFC1918_RANGES = [
    ip_network("10.0.0.0/8"),
    ip_network("172.16.0.0/12"),
    ip_network("192.168.0.0/16"),
]


class SubnetErrorKind(str, Enum):
    """Reasons a subnet calculation can be rejected."""

    INVALID_ADDRESS = "invalid_address"
    MISSING_ADDRESS = "missing_address"
    INVALID_PREFIX = "invalid_prefix"
    MISSING_PREFIX = "missing_prefix"
    INVALID_MASK = "invalid_mask"
    NON_CONTIGUOUS_MASK = "non_contiguous_mask"


ERROR_MESSAGES = {
    SubnetErrorKind.INVALID_ADDRESS: "Missing or invalid IP.",
    SubnetErrorKind.MISSING_ADDRESS: "Missing or invalid IP.",
    SubnetErrorKind.INVALID_PREFIX: "Invalid CIDR prefix (must be 0-32).",
    SubnetErrorKind.MISSING_PREFIX: "Missing subnet size (CIDR or mask).",
    SubnetErrorKind.INVALID_MASK: "Invalid mask.",
    SubnetErrorKind.NON_CONTIGUOUS_MASK: "Subnet mask must be contiguous (e.g., 255.255.255.0).",
}


@dataclass(frozen=True)
class SubnetError:
    """A rejected calculation."""

    kind: SubnetErrorKind

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind]


@dataclass(frozen=True)
class SubnetResult:
    """Everything derived from one (address, prefix) pair.

    Address-shaped fields are dotted-quad strings and bit fields are grouped
    binary strings, ready to be serialized as-is.
    """

    ip: str
    mask: str
    cidr: int
    network: str
    broadcast: str
    first_host: str
    last_host: str
    host_count: int
    wildcard_mask: str
    address_class: str
    is_private: bool
    ip_bits: str
    mask_bits: str
    network_bits: str
    broadcast_bits: str


def ipv4_to_int(value: str) -> int | None:
    """Parse a dotted-quad string into an unsigned 32-bit integer.

    Args:
        value: Address such as ``"192.168.1.10"``; surrounding whitespace is ignored

    Returns:
        The big-endian integer, or None if the string is not four decimal
        groups in 0-255
    """
    match = DOTTED_QUAD_RE.match(value.strip())
    if not match:
        return None

    octets = [int(group) for group in match.groups()]
    if any(octet > 255 for octet in octets):
        return None

    return (octets[0] << 24) | (octets[1] << 16) | (octets[2] << 8) | octets[3]


def int_to_ipv4(value: int) -> str:
    """Render an unsigned 32-bit integer as a canonical dotted quad."""
    return str(IPv4Address(value & MAX_IPV4))


def parse_prefix(value: int | str) -> int | None:
    """Return the CIDR prefix if it is an integer in 0-32, otherwise None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not PREFIX_RE.match(value):
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    return value if 0 <= value <= 32 else None


def prefix_to_mask(prefix: int) -> int:
    """Build the subnet mask with ``prefix`` leading one-bits."""
    # /0 has no network bits
    if prefix == 0:
        return 0
    return (MAX_IPV4 << (32 - prefix)) & MAX_IPV4


def mask_to_prefix(mask: int) -> int | None:
    """Count the leading one-bits of a mask.

    Returns:
        The prefix length, or None if a one-bit follows a zero-bit
    """
    seen_zero = False
    ones = 0
    for i in range(31, -1, -1):
        if (mask >> i) & 1:
            if seen_zero:
                return None
            ones += 1
        else:
            seen_zero = True
    return ones


def ipv4_class(address: int) -> str:
    """Legacy classful category (A-E) of an address."""
    first_octet = (address >> 24) & 0xFF
    if first_octet <= 127:
        return "A"
    if first_octet <= 191:
        return "B"
    if first_octet <= 223:
        return "C"
    if first_octet <= 239:
        return "D"
    return "E"


def is_private_ipv4(address: int) -> bool:
    """True if the address falls in one of the RFC1918 ranges.

    Loopback, link-local and shared address space are reported as public.
    """
    ip_obj = IPv4Address(address & MAX_IPV4)
    return any(ip_obj in rfc1918_range for rfc1918_range in RFC1918_RANGES)


def to_bits(value: int) -> str:
    """Render 32 bits MSB first as four space-separated octets."""
    bits = format(value & MAX_IPV4, "032b")
    return " ".join(bits[i : i + 8] for i in range(0, 32, 8))


def build_subnet(address: int, prefix: int) -> SubnetResult:
    """Derive the subnet details for a parsed address and prefix.

    Host ranges:
    - /32: the address itself is the only host
    - /31: both addresses are usable (RFC 3021 point-to-point)
    - /30 and larger: network and broadcast are excluded

    Args:
        address: Unsigned 32-bit address
        prefix: CIDR prefix in 0-32

    Returns:
        The computed SubnetResult
    """
    mask = prefix_to_mask(prefix)
    wildcard = ~mask & MAX_IPV4
    network = address & mask
    broadcast = network | wildcard

    if prefix == 32:
        host_count = 1
        first_host = last_host = address
    elif prefix == 31:
        host_count = 2
        first_host, last_host = network, broadcast
    else:
        total = 2 ** (32 - prefix)
        host_count = max(0, total - 2)
        first_host = network + 1
        last_host = broadcast - 1

    return SubnetResult(
        ip=int_to_ipv4(address),
        mask=int_to_ipv4(mask),
        cidr=prefix,
        network=int_to_ipv4(network),
        broadcast=int_to_ipv4(broadcast),
        first_host=int_to_ipv4(first_host),
        last_host=int_to_ipv4(last_host),
        host_count=host_count,
        wildcard_mask=int_to_ipv4(wildcard),
        address_class=ipv4_class(address),
        is_private=is_private_ipv4(address),
        ip_bits=to_bits(address),
        mask_bits=to_bits(mask),
        network_bits=to_bits(network),
        broadcast_bits=to_bits(broadcast),
    )


def _prefix_from_mask(mask: str) -> int | SubnetError:
    mask_int = ipv4_to_int(mask)
    if mask_int is None:
        return SubnetError(SubnetErrorKind.INVALID_MASK)
    prefix = mask_to_prefix(mask_int)
    if prefix is None:
        return SubnetError(SubnetErrorKind.NON_CONTIGUOUS_MASK)
    return prefix


def resolve_subnet_input(
    q: str | None = None,
    ip: str | None = None,
    cidr: int | str | None = None,
    mask: str | None = None,
) -> tuple[int, int] | SubnetError:
    """Collapse the accepted input shapes into one (address, prefix) pair.

    Fields are applied in order, each overwriting what came before:
    ``q`` ("ip/prefix" or just "ip"), then ``ip``, then ``cidr`` or ``mask``.
    When both ``cidr`` and ``mask`` are given, ``cidr`` wins and ``mask`` is
    not looked at. Empty strings count as absent.

    Returns:
        ``(address, prefix)`` on success, otherwise the first SubnetError in
        the order: mask problem, address problem, prefix problem
    """
    address: int | SubnetError = SubnetError(SubnetErrorKind.MISSING_ADDRESS)
    prefix: int | SubnetError = SubnetError(SubnetErrorKind.MISSING_PREFIX)
    mask_error: SubnetError | None = None

    if q:
        parts = q.strip().split("/")
        if len(parts) == 2:
            address = _parsed_or(ipv4_to_int(parts[0]), SubnetErrorKind.INVALID_ADDRESS)
            prefix = _parsed_or(parse_prefix(parts[1]), SubnetErrorKind.INVALID_PREFIX)
        elif len(parts) == 1:
            address = _parsed_or(ipv4_to_int(parts[0]), SubnetErrorKind.INVALID_ADDRESS)
        else:
            address = SubnetError(SubnetErrorKind.INVALID_ADDRESS)

    if ip:
        address = _parsed_or(ipv4_to_int(ip), SubnetErrorKind.INVALID_ADDRESS)

    if cidr is not None and cidr != "":
        prefix = _parsed_or(parse_prefix(cidr), SubnetErrorKind.INVALID_PREFIX)
    elif mask:
        prefix = _prefix_from_mask(mask)
        if isinstance(prefix, SubnetError):
            mask_error = prefix

    if mask_error is not None:
        return mask_error
    if isinstance(address, SubnetError):
        return address
    if isinstance(prefix, SubnetError):
        return prefix
    return address, prefix


def _parsed_or(value: int | None, kind: SubnetErrorKind) -> int | SubnetError:
    return SubnetError(kind) if value is None else value


def calculate(
    q: str | None = None,
    ip: str | None = None,
    cidr: int | str | None = None,
    mask: str | None = None,
) -> SubnetResult | SubnetError:
    """Resolve boundary inputs and compute the subnet in one step."""
    resolved = resolve_subnet_input(q=q, ip=ip, cidr=cidr, mask=mask)
    if isinstance(resolved, SubnetError):
        return resolved
    address, prefix = resolved
    return build_subnet(address, prefix)


def compute_subnet(address: str, prefix_or_mask: int | str | None) -> SubnetResult | SubnetError:
    """Compute a subnet from an address and either a prefix or a dotted mask.

    Args:
        address: Dotted-quad IPv4 address
        prefix_or_mask: CIDR prefix (int or decimal string) or a dotted mask

    Returns:
        SubnetResult on success, SubnetError describing the rejection otherwise
    """
    if isinstance(prefix_or_mask, str) and "." in prefix_or_mask:
        return calculate(ip=address, mask=prefix_or_mask)
    return calculate(ip=address, cidr=prefix_or_mask)
