"""Protocolo do cache read-through do catálogo de proxies.

Interface leve (ABC) dependida pelo gateway. Valores são strings JSON
já validadas; o cache não interpreta o conteúdo.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AsyncProxyCacheProtocol(ABC):
    """Contrato assíncrono mínimo para cache com TTL.

    Métodos canônicos:
    - get(key) -> str | None: valor ainda fresco ou None
    - set(key, value, ttl_seconds) -> None: grava com janela de frescor
    - ping() -> bool: disponibilidade do backend (readiness)
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Retorna o valor fresco associado à chave, ou None se ausente/expirado."""

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Grava valor com TTL em segundos."""

    @abstractmethod
    async def ping(self) -> bool:
        """Retorna True se o backend responde."""
