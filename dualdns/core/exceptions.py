"""
Resolver exceptions.
"""


class ResolverError(Exception):
    """Base exception for address resolution errors."""
    pass


class InvalidFormatError(ResolverError):
    """Address has no host:port separator or an empty host."""

    def __init__(self, addr: str):
        self.addr = addr
        super().__init__(f"Invalid address format: {addr!r} (expected domain:port or ip:port)")


class InvalidPortError(ResolverError):
    """Port segment is not an unsigned 16-bit integer."""

    def __init__(self, port: str):
        self.port = port
        super().__init__(f"Invalid port: {port!r}")


class ResolutionFailedError(ResolverError):
    """Neither AAAA nor A lookup produced an address."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"No usable address found for {domain}")


class QueryError(ResolverError):
    """A single record query failed at the transport level."""

    def __init__(self, domain: str, record_type: str, reason: str = ""):
        self.domain = domain
        self.record_type = record_type
        message = f"{record_type} query for {domain} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
