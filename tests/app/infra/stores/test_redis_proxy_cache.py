"""Testes do RedisProxyCache com mock."""

from __future__ import annotations

import hashlib
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.infra.stores.redis_proxy_cache import PROXY_CACHE_PREFIX, RedisProxyCache
from utils.errors import RedisConnectionError

URL = "https://api.example/list?token=secret"
EXPECTED_KEY = PROXY_CACHE_PREFIX + hashlib.sha256(URL.encode("utf-8")).hexdigest()


def _mock_redis() -> MagicMock:
    mock_redis = MagicMock()
    mock_redis.get = AsyncMock(return_value=None)
    mock_redis.setex = AsyncMock(return_value=True)
    mock_redis.ping = AsyncMock(return_value=True)
    return mock_redis


class TestRedisProxyCache:
    """Testes do RedisProxyCache."""

    @pytest.mark.asyncio
    async def test_set_uses_setex_with_hashed_key(self) -> None:
        """Não deve expor a URL upstream no keyspace."""
        mock_redis = _mock_redis()
        cache = RedisProxyCache(mock_redis)

        await cache.set(URL, '{"http": []}', ttl_seconds=7200)

        mock_redis.setex.assert_awaited_once_with(EXPECTED_KEY, 7200, '{"http": []}')
        assert "secret" not in EXPECTED_KEY

    @pytest.mark.asyncio
    async def test_get_decodes_bytes(self) -> None:
        mock_redis = _mock_redis()
        mock_redis.get.return_value = b'{"http": []}'
        cache = RedisProxyCache(mock_redis)

        assert await cache.get(URL) == '{"http": []}'
        mock_redis.get.assert_awaited_once_with(EXPECTED_KEY)

    @pytest.mark.asyncio
    async def test_get_miss(self) -> None:
        assert await RedisProxyCache(_mock_redis()).get(URL) is None

    @pytest.mark.asyncio
    async def test_errors_are_wrapped(self) -> None:
        """Falhas do Redis devem virar RedisConnectionError."""
        mock_redis = _mock_redis()
        mock_redis.get.side_effect = ConnectionError("down")
        mock_redis.setex.side_effect = ConnectionError("down")
        cache = RedisProxyCache(mock_redis)

        with pytest.raises(RedisConnectionError):
            await cache.get(URL)
        with pytest.raises(RedisConnectionError):
            await cache.set(URL, "{}", ttl_seconds=60)

    @pytest.mark.asyncio
    async def test_ping(self) -> None:
        mock_redis = _mock_redis()
        cache = RedisProxyCache(mock_redis)
        assert await cache.ping() is True

        mock_redis.ping.side_effect = ConnectionError("down")
        assert await cache.ping() is False
