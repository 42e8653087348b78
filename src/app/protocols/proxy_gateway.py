"""Protocolo do gateway de proxies usado pelo roteador.

Evita dependência direta de app/services na camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.proxy_catalog import ProxyCatalogResult


class ProxyGatewayProtocol(Protocol):
    """Contrato mínimo: uma busca por comando, nunca lança exceção."""

    async def fetch(self) -> ProxyCatalogResult: ...
