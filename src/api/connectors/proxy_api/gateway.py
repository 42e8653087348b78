"""Gateway do catálogo de proxies com cache read-through.

Fluxo de fetch():
1. Consulta o cache pela URL upstream (janela de frescor padrão: 2h)
2. Em miss, faz um único GET na API
3. Valida o contrato `{success, http, https, socks4, socks5}`
4. Grava apenas catálogos válidos no cache

Nunca lança exceção: o chamador sempre recebe ProxyCatalogResult.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.proxy_catalog import (
    ProxyCatalog,
    ProxyCatalogFailure,
    ProxyCatalogResult,
    ProxyCatalogSuccess,
)
from app.observability import get_correlation_id, record_cache_lookup, record_latency
from config.settings.proxy_api import DEFAULT_CACHE_TTL_SECONDS
from utils.errors import InfrastructureError, UpstreamUnavailableError

from .http_client import HttpError, ProxyApiHttpClient

if TYPE_CHECKING:
    from app.protocols.proxy_cache import AsyncProxyCacheProtocol

logger = logging.getLogger(__name__)


def parse_proxy_api_response(payload: Any) -> ProxyCatalog:
    """Converte o JSON da API em ProxyCatalog.

    Raises:
        UpstreamUnavailableError: Se `success` não for true ou o formato divergir
    """
    if not isinstance(payload, dict):
        raise UpstreamUnavailableError("payload_not_object")
    if payload.get("success") is not True:
        raise UpstreamUnavailableError("upstream_reported_failure")
    try:
        return ProxyCatalog.model_validate(payload)
    except ValidationError as exc:
        raise UpstreamUnavailableError("schema_mismatch") from exc


class ProxyGateway:
    """Busca o catálogo categorizado de uma URL única.

    Args:
        upstream_url: URL da API de proxies (também é a chave do cache)
        http_client: Cliente GET JSON
        cache: Cache read-through (opcional)
        cache_ttl_seconds: Janela de frescor
    """

    def __init__(
        self,
        upstream_url: str,
        http_client: ProxyApiHttpClient,
        cache: AsyncProxyCacheProtocol | None = None,
        cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        self._upstream_url = upstream_url
        self._http_client = http_client
        self._cache = cache
        self._cache_ttl_seconds = cache_ttl_seconds

    async def fetch(self) -> ProxyCatalogResult:
        """Retorna o catálogo do cache ou da API."""
        cached = await self._read_cache()
        if cached is not None:
            return ProxyCatalogSuccess(catalog=cached, from_cache=True)

        started_at = time.perf_counter()
        try:
            payload = await self._http_client.get_json(self._upstream_url)
            catalog = parse_proxy_api_response(payload)
        except HttpError as exc:
            return self._failure(str(exc), status_code=exc.status_code)
        except UpstreamUnavailableError as exc:
            return self._failure(exc.reason)
        finally:
            latency_ms = (time.perf_counter() - started_at) * 1000
            record_latency("proxy_gateway", "fetch", latency_ms, get_correlation_id())

        logger.info(
            "proxy_catalog_fetched",
            extra={
                "http_count": len(catalog.http),
                "https_count": len(catalog.https),
                "socks4_count": len(catalog.socks4),
                "socks5_count": len(catalog.socks5),
            },
        )
        await self._write_cache(catalog)
        return ProxyCatalogSuccess(catalog=catalog)

    def _failure(self, reason: str, status_code: int | None = None) -> ProxyCatalogFailure:
        logger.warning(
            "proxy_api_request_failed",
            extra={"reason": reason, "status_code": status_code},
        )
        return ProxyCatalogFailure(reason=reason)

    async def _read_cache(self) -> ProxyCatalog | None:
        if self._cache is None:
            return None
        try:
            raw = await self._cache.get(self._upstream_url)
        except InfrastructureError as exc:
            logger.warning("proxy_cache_read_failed", extra={"error_type": type(exc).__name__})
            return None

        if raw is None:
            record_cache_lookup("proxy_catalog", hit=False)
            return None

        try:
            catalog = ProxyCatalog.model_validate_json(raw)
        except ValidationError:
            logger.warning("proxy_cache_entry_invalid")
            return None
        record_cache_lookup("proxy_catalog", hit=True)
        logger.debug("proxy_catalog_cache_hit")
        return catalog

    async def _write_cache(self, catalog: ProxyCatalog) -> None:
        if self._cache is None:
            return
        try:
            await self._cache.set(
                self._upstream_url,
                catalog.model_dump_json(),
                self._cache_ttl_seconds,
            )
        except InfrastructureError as exc:
            logger.warning("proxy_cache_write_failed", extra={"error_type": type(exc).__name__})
