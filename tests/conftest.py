"""
Pytest configuration and shared fixtures.
"""

import ipaddress
import pytest


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DUALDNS_* variables so settings start from defaults."""
    import os

    for name in list(os.environ):
        if name.startswith("DUALDNS_"):
            monkeypatch.delenv(name)


# ============================================================================
# Fake Transport
# ============================================================================

class FakeTransport:
    """In-memory record transport that records every query."""

    def __init__(self, records=None, errors=None):
        self.records = records or {}
        self.errors = errors or {}
        self.calls = []

    def query(self, domain, record_type):
        self.calls.append((domain, record_type))
        if (domain, record_type) in self.errors:
            raise self.errors[(domain, record_type)]
        return [ipaddress.ip_address(ip) for ip in self.records.get((domain, record_type), [])]


@pytest.fixture
def fake_transport():
    """Create an empty FakeTransport."""
    return FakeTransport()


@pytest.fixture
def address_resolver(fake_transport):
    """Create an AddressResolver on top of the fake transport."""
    from dualdns.services.dns import AddressResolver
    return AddressResolver(fake_transport)


@pytest.fixture
def dnspython_transport():
    """Create a DnspythonTransport with default endpoints."""
    from dualdns.services.transport import DnspythonTransport
    return DnspythonTransport()
