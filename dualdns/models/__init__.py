# Data models
from .address import (
    DEFAULT_ENDPOINTS,
    ResolvedSocketAddress,
    ResolverEndpoint,
    parse_socket_address,
)

__all__ = [
    "DEFAULT_ENDPOINTS",
    "ResolvedSocketAddress",
    "ResolverEndpoint",
    "parse_socket_address",
]
