"""Cache em memória do catálogo de proxies.

Válido por processo: cada réplica mantém sua própria cópia.
Sem persistência entre reinícios.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from app.protocols.proxy_cache import AsyncProxyCacheProtocol


class MemoryProxyCache(AsyncProxyCacheProtocol):
    """Cache TTL em memória, indexado pela chave (URL upstream)."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: dict[str, tuple[str, float]] = {}  # key -> (value, expires_at)

    def _cleanup_expired(self) -> None:
        """Remove entradas expiradas."""
        now = self._clock()
        expired = [k for k, (_, expires_at) in self._store.items() if expires_at <= now]
        for k in expired:
            del self._store[k]

    async def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._cleanup_expired()
        self._store[key] = (value, self._clock() + ttl_seconds)

    async def ping(self) -> bool:
        return True

    def clear(self) -> None:
        """Esvazia o cache (testes e recarga manual)."""
        self._store.clear()
