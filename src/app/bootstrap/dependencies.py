"""Factories — criação das implementações concretas do pipeline.

Este módulo centraliza a criação do cache, do gateway e do roteador
a partir das settings de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.proxy_api import HttpClientConfig, ProxyApiHttpClient, ProxyGateway
from app.bootstrap.clients import create_async_redis_client
from app.infra.stores import MemoryProxyCache, RedisProxyCache
from app.services.interaction_router import InteractionRouter, InteractionRouterConfig
from config.settings import (
    get_base_settings,
    get_discord_settings,
    get_proxy_api_settings,
)

if TYPE_CHECKING:
    from app.protocols.proxy_cache import AsyncProxyCacheProtocol
    from config.settings import DiscordSettings, ProxyApiSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Proxy Cache Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_proxy_cache(settings: ProxyApiSettings | None = None) -> AsyncProxyCacheProtocol:
    """Cria cache do catálogo baseado na configuração.

    Lê PROXY_CACHE_BACKEND:
    - "memory": MemoryProxyCache (por processo)
    - "redis": RedisProxyCache (compartilhado entre réplicas)
    """
    proxy_settings = settings or get_proxy_api_settings()
    backend = proxy_settings.cache_backend

    if backend == "redis":
        cache: AsyncProxyCacheProtocol = RedisProxyCache(create_async_redis_client())
        logger.info("proxy_cache_created", extra={"backend": "redis"})
        return cache

    if backend == "memory":
        environment = get_base_settings().environment
        if environment == "production":
            logger.info(
                "memory_proxy_cache_in_production",
                extra={"backend": "memory", "environment": environment},
            )
        cache = MemoryProxyCache()
        logger.info("proxy_cache_created", extra={"backend": "memory"})
        return cache

    msg = f"PROXY_CACHE_BACKEND inválido: {backend}"
    raise ValueError(msg)


# ──────────────────────────────────────────────────────────────────────────────
# Gateway & Router Factories
# ──────────────────────────────────────────────────────────────────────────────


def create_proxy_gateway(
    settings: ProxyApiSettings | None = None,
    cache: AsyncProxyCacheProtocol | None = None,
) -> ProxyGateway:
    """Cria o gateway com cliente HTTP e cache read-through."""
    proxy_settings = settings or get_proxy_api_settings()
    http_client = ProxyApiHttpClient(
        HttpClientConfig(timeout_seconds=proxy_settings.request_timeout_seconds)
    )
    return ProxyGateway(
        upstream_url=proxy_settings.api_url,
        http_client=http_client,
        cache=cache if cache is not None else create_proxy_cache(proxy_settings),
        cache_ttl_seconds=proxy_settings.cache_ttl_seconds,
    )


def create_interaction_router_config(
    settings: DiscordSettings | None = None,
) -> InteractionRouterConfig:
    """Monta a configuração imutável do roteador."""
    discord = settings or get_discord_settings()
    return InteractionRouterConfig(
        invite_url=discord.invite_url,
        max_attachment_bytes=discord.max_attachment_bytes,
    )


def create_interaction_router(
    cache: AsyncProxyCacheProtocol | None = None,
) -> InteractionRouter:
    """Cria o roteador de interações com todas as dependências."""
    router = InteractionRouter(
        gateway=create_proxy_gateway(cache=cache),
        config=create_interaction_router_config(),
    )
    logger.info("interaction_router_created")
    return router
