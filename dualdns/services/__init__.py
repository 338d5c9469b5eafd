# Services module - resolution and DNS transports
from .batch import BatchResolver, resolve_addrs
from .compat import DEFAULT_RESOLVER, lookup_txt, resolve_host_port
from .dns import AddressResolver, default_resolver, resolve_addr
from .transport import DnspythonTransport, RecordTransport

__all__ = [
    "AddressResolver",
    "BatchResolver",
    "DEFAULT_RESOLVER",
    "DnspythonTransport",
    "RecordTransport",
    "default_resolver",
    "lookup_txt",
    "resolve_addr",
    "resolve_addrs",
    "resolve_host_port",
]
