"""
DNS record transports.

A transport performs one record-type query for one domain and returns the
addresses found. The resolution algorithm only depends on this interface, so
the underlying DNS client can be swapped without touching it.
"""

import ipaddress
from typing import Iterable, Protocol

import dns.exception
import dns.nameserver
import dns.resolver

from dualdns.core.exceptions import QueryError
from dualdns.core.logging import get_logger
from dualdns.models.address import DEFAULT_ENDPOINTS, IPAddress, ResolverEndpoint

logger = get_logger(__name__)

RECORD_TYPES = ("AAAA", "A")


class RecordTransport(Protocol):
    """Performs a record-type query against a domain."""

    def query(self, domain: str, record_type: str) -> list[IPAddress]:
        ...


class DnspythonTransport:
    """Record transport backed by dnspython, bound to fixed UDP endpoints."""

    def __init__(
        self,
        endpoints: Iterable[ResolverEndpoint] = DEFAULT_ENDPOINTS,
        timeout: float = 5.0,
        attempts: int = 2,
        rotate: bool = True,
    ):
        self._endpoints = tuple(endpoints)
        if not self._endpoints:
            raise ValueError("At least one DNS endpoint is required")

        # configure=False skips /etc/resolv.conf; dnspython never reads the hosts file
        self._resolver = dns.resolver.Resolver(configure=False)
        self._resolver.nameservers = [
            dns.nameserver.Do53Nameserver(str(endpoint.ip), endpoint.port)
            for endpoint in self._endpoints
        ]
        self._resolver.timeout = timeout
        self._resolver.lifetime = timeout * attempts
        self._resolver.rotate = rotate

    @property
    def endpoints(self) -> tuple[ResolverEndpoint, ...]:
        return self._endpoints

    def query(self, domain: str, record_type: str) -> list[IPAddress]:
        """
        Query domain for AAAA or A records.

        Args:
            domain: Domain name, queried as an absolute name
            record_type: "AAAA" or "A"

        Returns:
            Addresses in answer order; empty if the name or record does not exist

        Raises:
            QueryError: On timeout, unreachable servers or other DNS errors
        """
        if record_type not in RECORD_TYPES:
            raise ValueError(f"Unsupported record type: {record_type}")

        try:
            answers = self._resolver.resolve(domain, record_type, search=False)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            logger.debug(f"No {record_type} records found for {domain}")
            return []
        except dns.exception.Timeout as e:
            raise QueryError(domain, record_type, f"timed out: {e}") from e
        except dns.exception.DNSException as e:
            raise QueryError(domain, record_type, str(e)) from e

        return [ipaddress.ip_address(rdata.address) for rdata in answers]
