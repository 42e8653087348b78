"""Protocolos e contratos do core da aplicação."""

from .proxy_cache import AsyncProxyCacheProtocol
from .proxy_gateway import ProxyGatewayProtocol

__all__ = [
    "AsyncProxyCacheProtocol",
    "ProxyGatewayProtocol",
]
