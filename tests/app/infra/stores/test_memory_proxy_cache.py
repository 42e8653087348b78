"""Testes do MemoryProxyCache."""

from __future__ import annotations

import pytest

from app.infra.stores.memory_proxy_cache import MemoryProxyCache


class _FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestMemoryProxyCache:
    """Testes do MemoryProxyCache."""

    @pytest.mark.asyncio
    async def test_set_and_get(self) -> None:
        """Deve retornar o valor dentro da janela."""
        cache = MemoryProxyCache()
        await cache.set("https://api.example/list", '{"http": []}', ttl_seconds=60)

        assert await cache.get("https://api.example/list") == '{"http": []}'

    @pytest.mark.asyncio
    async def test_missing_key_returns_none(self) -> None:
        assert await MemoryProxyCache().get("nope") is None

    @pytest.mark.asyncio
    async def test_entry_expires_after_ttl(self) -> None:
        """Deve expirar exatamente ao fim do TTL."""
        clock = _FakeClock()
        cache = MemoryProxyCache(clock=clock)
        await cache.set("key", "value", ttl_seconds=7200)

        clock.now += 7199
        assert await cache.get("key") == "value"

        clock.now += 1
        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_set_overwrites_and_renews(self) -> None:
        clock = _FakeClock()
        cache = MemoryProxyCache(clock=clock)
        await cache.set("key", "old", ttl_seconds=10)
        clock.now += 5
        await cache.set("key", "new", ttl_seconds=10)
        clock.now += 8

        assert await cache.get("key") == "new"

    @pytest.mark.asyncio
    async def test_clear_and_ping(self) -> None:
        cache = MemoryProxyCache()
        await cache.set("key", "value", ttl_seconds=10)
        cache.clear()

        assert await cache.get("key") is None
        assert await cache.ping() is True
