"""Redis Proxy Cache — catálogo compartilhado entre réplicas.

Usa SETEX para que a expiração seja responsabilidade do Redis,
mantendo a mesma janela de frescor em todas as instâncias.

Contrato de Keys:
    A chave recebida é a URL upstream; no Redis é usado o SHA256 dela
    com namespace, para não expor query strings (tokens de API) no keyspace.
"""

from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING

from app.protocols.proxy_cache import AsyncProxyCacheProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# Prefixo para namespace do cache
PROXY_CACHE_PREFIX = "proxy_catalog:"


class RedisProxyCache(AsyncProxyCacheProtocol):
    """Cache de catálogo usando Redis assíncrono.

    Args:
        redis_client: Cliente Redis assíncrono
    """

    def __init__(self, redis_client: AsyncRedis[bytes]) -> None:
        self._redis = redis_client

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return f"{PROXY_CACHE_PREFIX}{digest}"

    async def get(self, key: str) -> str | None:
        """Lê valor do Redis.

        Raises:
            RedisConnectionError: Se o Redis falhar
        """
        try:
            raw = await self._redis.get(self._key(key))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler cache de proxies no Redis") from exc
        if raw is None:
            return None
        return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Grava valor com SETEX.

        Raises:
            RedisConnectionError: Se o Redis falhar
        """
        try:
            await self._redis.setex(self._key(key), ttl_seconds, value)
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar cache de proxies no Redis") from exc
        logger.debug("proxy_cache_stored", extra={"ttl_seconds": ttl_seconds})

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except Exception as exc:
            logger.warning("redis_ping_failed", extra={"error_type": type(exc).__name__})
            return False
