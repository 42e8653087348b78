"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    RedisConnectionError,
    UpstreamUnavailableError,
)

__all__ = [
    "InfrastructureError",
    "RedisConnectionError",
    "UpstreamUnavailableError",
]
