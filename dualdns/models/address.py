"""
Socket address and DNS endpoint models.
"""

import ipaddress
import socket
from dataclasses import dataclass

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

DNS_PORT = 53


def parse_port(text: str, allow_sign: bool = False) -> int | None:
    """
    Parse a decimal u16 port, or return None.

    Leading zeros are allowed. With allow_sign, one leading "+" is accepted.
    """
    if allow_sign and text.startswith("+"):
        text = text[1:]
    if not text or not (text.isascii() and text.isdigit()):
        return None
    port = int(text)
    if port > 65535:
        return None
    return port


@dataclass(frozen=True)
class ResolvedSocketAddress:
    """Concrete, connectable socket address."""

    ip: IPAddress
    port: int

    @classmethod
    def from_ip(cls, ip: IPAddress | str, port: int) -> "ResolvedSocketAddress":
        """Build from an address object or its text form."""
        return cls(ip=ipaddress.ip_address(ip), port=port)

    @property
    def family(self) -> socket.AddressFamily:
        if self.ip.version == 6:
            return socket.AF_INET6
        return socket.AF_INET

    @property
    def packed(self) -> bytes:
        return self.ip.packed

    @property
    def sockaddr(self) -> tuple:
        """Tuple accepted by socket.connect() for this family."""
        if self.ip.version == 6:
            return (str(self.ip), self.port, 0, 0)
        return (str(self.ip), self.port)

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


@dataclass(frozen=True)
class ResolverEndpoint:
    """DNS server queried over UDP."""

    ip: IPAddress
    port: int = DNS_PORT

    @classmethod
    def parse(cls, text: str) -> "ResolverEndpoint":
        """
        Parse an endpoint from "ip:port", "[v6]:port" or a bare IP.

        Raises:
            ValueError: If text is not a literal endpoint
        """
        address = parse_socket_address(text)
        if address is not None:
            return cls(ip=address.ip, port=address.port)
        return cls(ip=ipaddress.ip_address(text.strip("[]")))

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


DEFAULT_ENDPOINTS: tuple[ResolverEndpoint, ...] = (
    ResolverEndpoint(ipaddress.IPv6Address("2606:4700:4700::1111")),
    ResolverEndpoint(ipaddress.IPv4Address("1.1.1.1")),
)


def parse_socket_address(text: str) -> ResolvedSocketAddress | None:
    """
    Parse a literal socket address.

    Accepts "a.b.c.d:port" and "[v6]:port". Bare IPv6 literals without
    brackets are not socket addresses.

    Returns:
        The parsed address, or None if text is not a literal socket address
    """
    if text.startswith("["):
        host, sep, port_text = text[1:].partition("]:")
        if not sep:
            return None
        try:
            ip = ipaddress.IPv6Address(host)
        except ValueError:
            return None
        # Only numeric scope ids form a socket address
        if ip.scope_id is not None and not (ip.scope_id.isascii() and ip.scope_id.isdigit()):
            return None
    else:
        host, sep, port_text = text.rpartition(":")
        if not sep:
            return None
        try:
            ip = ipaddress.IPv4Address(host)
        except ValueError:
            return None

    port = parse_port(port_text)
    if port is None:
        return None
    return ResolvedSocketAddress(ip=ip, port=port)
