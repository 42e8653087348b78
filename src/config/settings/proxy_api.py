"""Settings da API upstream de proxies e do cache read-through."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

ProxyCacheBackend = Literal["memory", "redis"]

# Janela de frescor do catálogo (2 horas)
DEFAULT_CACHE_TTL_SECONDS: int = 2 * 60 * 60


@dataclass(frozen=True)
class ProxyApiSettings:
    """Configurações da API de proxies.

    Attributes:
        api_url: URL única que retorna o catálogo categorizado
        request_timeout_seconds: Timeout da chamada upstream
        cache_ttl_seconds: Janela de frescor do cache, por URL
        cache_backend: Backend do cache (memory|redis)
    """

    api_url: str = ""
    request_timeout_seconds: float = 10.0
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    cache_backend: ProxyCacheBackend = "memory"

    def validate(self) -> list[str]:
        """Valida configurações da API de proxies."""
        errors: list[str] = []
        if not self.api_url:
            errors.append("PROXY_API_URL não configurado")
        elif not self.api_url.startswith(("http://", "https://")):
            errors.append("PROXY_API_URL deve ser http(s)")
        if self.request_timeout_seconds <= 0:
            errors.append("PROXY_API_TIMEOUT_SECONDS deve ser > 0")
        if self.cache_ttl_seconds <= 0:
            errors.append("PROXY_CACHE_TTL_SECONDS deve ser > 0")
        if self.cache_backend not in ("memory", "redis"):
            errors.append("PROXY_CACHE_BACKEND deve ser 'memory' ou 'redis'")
        return errors


def _load_from_env() -> ProxyApiSettings:
    """Carrega ProxyApiSettings de variáveis de ambiente."""
    return ProxyApiSettings(
        api_url=os.getenv("PROXY_API_URL", ""),
        request_timeout_seconds=float(os.getenv("PROXY_API_TIMEOUT_SECONDS", "10")),
        cache_ttl_seconds=int(
            os.getenv("PROXY_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS))
        ),
        cache_backend=os.getenv("PROXY_CACHE_BACKEND", "memory").lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_proxy_api_settings() -> ProxyApiSettings:
    """Retorna instância cacheada de ProxyApiSettings."""
    return _load_from_env()
