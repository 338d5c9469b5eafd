"""
Resolver configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import os
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

from dualdns.models.address import DEFAULT_ENDPOINTS, ResolverEndpoint


class Settings(BaseSettings):
    """Resolver settings loaded from DUALDNS_* environment variables."""

    # Upstream servers: exactly one IPv6 and one IPv4, "ip:port" or "[v6]:port"
    dns_servers: list[str] = [str(endpoint) for endpoint in DEFAULT_ENDPOINTS]

    # Per-attempt timeout and attempts per query
    dns_timeout: float = Field(default=5.0, gt=0)
    dns_attempts: int = Field(default=2, ge=1)
    dns_rotate: bool = True

    # Extra AAAA attempts before falling back to A
    ipv6_retries: int = Field(default=0, ge=0)

    log_level: str = "INFO"

    @field_validator("dns_servers")
    @classmethod
    def _validate_dns_servers(cls, value: list[str]) -> list[str]:
        endpoints = [ResolverEndpoint.parse(item) for item in value]
        versions = sorted(endpoint.ip.version for endpoint in endpoints)
        if versions != [4, 6]:
            raise ValueError("dns_servers must hold exactly one IPv6 and one IPv4 server")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def endpoints(self) -> tuple[ResolverEndpoint, ...]:
        """Parsed upstream endpoints, in configured order."""
        return tuple(ResolverEndpoint.parse(item) for item in self.dns_servers)

    model_config = {
        "env_prefix": "DUALDNS_",
        "env_file": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton settings instance
settings = Settings()
