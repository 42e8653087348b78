"""Stores — implementações concretas do cache de proxies.

Módulos disponíveis:
    - memory_proxy_cache: cache em memória (por processo)
    - redis_proxy_cache: cache compartilhado usando Redis
"""

from __future__ import annotations

from app.infra.stores.memory_proxy_cache import MemoryProxyCache
from app.infra.stores.redis_proxy_cache import RedisProxyCache

__all__ = [
    "MemoryProxyCache",
    "RedisProxyCache",
]
