"""
Tests for models module.
"""

import dataclasses
import ipaddress
import socket
import pytest


class TestParseSocketAddress:
    """Tests for parse_socket_address."""

    @pytest.mark.parametrize("text, ip, port", [
        ("1.2.3.4:80", "1.2.3.4", 80),
        ("[::1]:8080", "::1", 8080),
        ("[2606:4700:4700::1111]:53", "2606:4700:4700::1111", 53),
        ("0.0.0.0:00080", "0.0.0.0", 80),
        ("1.2.3.4:0000000080", "1.2.3.4", 80),
        ("[fe80::1%3]:80", "fe80::1%3", 80),
    ])
    def test_valid_literals(self, text, ip, port):
        """Test that literal socket addresses parse."""
        from dualdns.models.address import parse_socket_address

        result = parse_socket_address(text)

        assert result is not None
        assert result.ip == ipaddress.ip_address(ip)
        assert result.port == port

    @pytest.mark.parametrize("text", [
        "example.com:80",
        "::1:80",
        "[::1]",
        "[::1]80",
        "1.2.3.4",
        "01.2.3.4:80",
        "1.2.3.4:65536",
        "1.2.3.4:",
        "[1.2.3.4]:80",
        "[fe80::1%eth0]:80",
        "1.2.3.4:+80",
        "",
    ])
    def test_non_literals(self, text):
        """Test that anything else returns None."""
        from dualdns.models.address import parse_socket_address

        assert parse_socket_address(text) is None


class TestParsePort:
    """Tests for parse_port."""

    @pytest.mark.parametrize("text, expected", [
        ("0", 0),
        ("65535", 65535),
        ("000080", 80),
        ("+80", None),
        ("65536", None),
        ("", None),
        (" 80", None),
        ("8_0", None),
        ("\u0668\u0660", None),
    ])
    def test_unsigned(self, text, expected):
        """Test plain decimal ports with zero padding."""
        from dualdns.models.address import parse_port

        assert parse_port(text) == expected

    @pytest.mark.parametrize("text, expected", [
        ("+80", 80),
        ("+000080", 80),
        ("80", 80),
        ("+", None),
        ("++80", None),
        ("-80", None),
        ("+65536", None),
    ])
    def test_allow_sign(self, text, expected):
        """Test that allow_sign accepts a single leading plus."""
        from dualdns.models.address import parse_port

        assert parse_port(text, allow_sign=True) == expected


class TestResolvedSocketAddress:
    """Tests for ResolvedSocketAddress dataclass."""

    def test_ipv4_properties(self):
        """Test family, packed bytes and sockaddr for IPv4."""
        from dualdns.models.address import ResolvedSocketAddress

        addr = ResolvedSocketAddress.from_ip("1.2.3.4", 80)

        assert addr.family == socket.AF_INET
        assert addr.packed == b"\x01\x02\x03\x04"
        assert addr.sockaddr == ("1.2.3.4", 80)
        assert str(addr) == "1.2.3.4:80"

    def test_ipv6_properties(self):
        """Test family, packed bytes and sockaddr for IPv6."""
        from dualdns.models.address import ResolvedSocketAddress

        addr = ResolvedSocketAddress.from_ip("::1", 443)

        assert addr.family == socket.AF_INET6
        assert len(addr.packed) == 16
        assert addr.sockaddr == ("::1", 443, 0, 0)
        assert str(addr) == "[::1]:443"

    def test_is_immutable(self):
        """Test that resolved addresses cannot be modified."""
        from dualdns.models.address import ResolvedSocketAddress

        addr = ResolvedSocketAddress.from_ip("1.2.3.4", 80)

        with pytest.raises(dataclasses.FrozenInstanceError):
            addr.port = 81


class TestResolverEndpoint:
    """Tests for ResolverEndpoint and default endpoints."""

    def test_default_endpoints(self):
        """Test that there are exactly two defaults, IPv6 then IPv4, on port 53."""
        from dualdns.models.address import DEFAULT_ENDPOINTS

        assert isinstance(DEFAULT_ENDPOINTS, tuple)
        assert len(DEFAULT_ENDPOINTS) == 2
        assert str(DEFAULT_ENDPOINTS[0].ip) == "2606:4700:4700::1111"
        assert str(DEFAULT_ENDPOINTS[1].ip) == "1.1.1.1"
        assert all(endpoint.port == 53 for endpoint in DEFAULT_ENDPOINTS)

    def test_default_endpoints_frozen(self):
        """Test that endpoints cannot be modified."""
        from dualdns.models.address import DEFAULT_ENDPOINTS

        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ENDPOINTS[0].port = 5353

    @pytest.mark.parametrize("text, ip, port", [
        ("1.1.1.1:53", "1.1.1.1", 53),
        ("[::1]:5353", "::1", 5353),
        ("8.8.8.8", "8.8.8.8", 53),
        ("2001:4860:4860::8888", "2001:4860:4860::8888", 53),
    ])
    def test_parse(self, text, ip, port):
        """Test endpoint parsing with and without port."""
        from dualdns.models.address import ResolverEndpoint

        endpoint = ResolverEndpoint.parse(text)

        assert endpoint.ip == ipaddress.ip_address(ip)
        assert endpoint.port == port

    def test_parse_invalid(self):
        """Test that a hostname is not an endpoint."""
        from dualdns.models.address import ResolverEndpoint

        with pytest.raises(ValueError):
            ResolverEndpoint.parse("dns.google:53")
