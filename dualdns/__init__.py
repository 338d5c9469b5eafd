# dualdns - dual-stack address resolution against fixed public DNS servers
from .core.exceptions import (
    InvalidFormatError,
    InvalidPortError,
    ResolutionFailedError,
    ResolverError,
)
from .models.address import ResolvedSocketAddress, ResolverEndpoint
from .services.batch import BatchResolver, resolve_addrs
from .services.dns import AddressResolver, resolve_addr

__version__ = "0.1.0"

__all__ = [
    "AddressResolver",
    "BatchResolver",
    "InvalidFormatError",
    "InvalidPortError",
    "ResolutionFailedError",
    "ResolvedSocketAddress",
    "ResolverEndpoint",
    "ResolverError",
    "resolve_addr",
    "resolve_addrs",
]
