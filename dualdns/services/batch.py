"""
Ordered resolution of several addresses.
"""

from typing import Iterable

from dualdns.models.address import ResolvedSocketAddress
from . import dns
from .dns import AddressResolver


class BatchResolver:
    """Resolves addresses one by one, in input order."""

    def __init__(self, resolver: AddressResolver):
        self._resolver = resolver

    def resolve_all(self, addrs: Iterable[str]) -> list[ResolvedSocketAddress]:
        """
        Resolve every address, stopping at the first failure.

        Raises:
            ResolverError: The first error hit; earlier results are discarded
        """
        return [self._resolver.resolve(addr) for addr in addrs]


def resolve_addrs(addrs: Iterable[str]) -> list[ResolvedSocketAddress]:
    """Resolve addresses with the default resolver."""
    return BatchResolver(dns.default_resolver).resolve_all(addrs)
