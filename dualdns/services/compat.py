"""
No-op lookups kept for existing callers.
"""

from dualdns.models.address import ResolvedSocketAddress

# Handle for callers that only need to name the default resolver
DEFAULT_RESOLVER = "default"


def lookup_txt(domain: str) -> list[str]:
    """TXT lookup stub; always empty, performs no network I/O."""
    return []


def resolve_host_port(host: str, port: int) -> list[ResolvedSocketAddress]:
    """Host/port enumeration stub; always empty."""
    return []
