"""
Dual-stack address resolution.

Turns "ip:port" or "domain:port" into a ResolvedSocketAddress, preferring
AAAA over A and querying only the configured upstream servers.
"""

import logging

from dualdns.core.config import Settings, settings
from dualdns.core.exceptions import (
    InvalidFormatError,
    InvalidPortError,
    QueryError,
    ResolutionFailedError,
)
from dualdns.core.logging import get_logger
from dualdns.models.address import (
    IPAddress,
    ResolvedSocketAddress,
    parse_port,
    parse_socket_address,
)
from .transport import DnspythonTransport, RecordTransport


class AddressResolver:
    """Resolves one address string, IPv6 first with IPv4 fallback."""

    def __init__(
        self,
        transport: RecordTransport,
        logger: logging.Logger | None = None,
        ipv6_retries: int = 0,
    ):
        if ipv6_retries < 0:
            raise ValueError("ipv6_retries must be >= 0")
        self._transport = transport
        self._logger = logger or get_logger(__name__)
        self._ipv6_retries = ipv6_retries

    @classmethod
    def from_settings(cls, config: Settings, logger: logging.Logger | None = None) -> "AddressResolver":
        """Build a resolver with a dnspython transport from settings."""
        transport = DnspythonTransport(
            endpoints=config.endpoints,
            timeout=config.dns_timeout,
            attempts=config.dns_attempts,
            rotate=config.dns_rotate,
        )
        return cls(transport, logger=logger, ipv6_retries=config.ipv6_retries)

    @property
    def transport(self) -> RecordTransport:
        return self._transport

    def resolve(self, addr: str) -> ResolvedSocketAddress:
        """
        Resolve an address to a concrete socket address.

        Args:
            addr: "ip:port", "[v6]:port" or "domain:port"

        Returns:
            Resolved socket address; the port is kept exactly as given

        Raises:
            InvalidFormatError: If there is no host:port separator
            InvalidPortError: If the port is not a u16
            ResolutionFailedError: If neither AAAA nor A yields an address
        """
        self._logger.debug(f"Resolving {addr} (IPv6 preferred)")

        literal = parse_socket_address(addr)
        if literal is not None:
            self._logger.debug(f"{addr} is a literal address")
            return literal

        domain, sep, port_str = addr.rpartition(":")
        if not sep:
            raise InvalidFormatError(addr)

        port = parse_port(port_str, allow_sign=True)
        if port is None:
            raise InvalidPortError(port_str)

        if not domain:
            raise ResolutionFailedError(domain)

        ip = self._lookup_ipv6(domain)
        if ip is None:
            self._logger.info(f"IPv6 lookup failed for {domain}, trying IPv4")
            ip = self._query_first(domain, "A")

        if ip is None:
            raise ResolutionFailedError(domain)

        result = ResolvedSocketAddress(ip=ip, port=port)
        self._logger.info(f"Resolved {addr} -> {result}")
        return result

    def _lookup_ipv6(self, domain: str) -> IPAddress | None:
        for _ in range(self._ipv6_retries + 1):
            ip = self._query_first(domain, "AAAA")
            if ip is not None:
                return ip
        return None

    def _query_first(self, domain: str, record_type: str) -> IPAddress | None:
        try:
            addresses = self._transport.query(domain, record_type)
        except QueryError as e:
            self._logger.warning(str(e))
            return None

        if not addresses:
            self._logger.debug(f"No {record_type} records for {domain}")
            return None
        return addresses[0]


# Default resolver instance
default_resolver = AddressResolver.from_settings(settings)


def resolve_addr(addr: str) -> ResolvedSocketAddress:
    """Resolve an address with the default resolver."""
    return default_resolver.resolve(addr)
