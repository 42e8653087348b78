"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pela plataforma de logs.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Cache: hit/miss do catálogo de proxies
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "proxy_gateway")
        operation: Nome da operação (ex: "fetch")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_cache_lookup(cache_name: str, *, hit: bool) -> None:
    """Registra resultado de consulta ao cache read-through."""
    logger.info(
        "metric_cache_lookup",
        extra={
            "metric_type": "counter",
            "cache": cache_name,
            "result": "hit" if hit else "miss",
        },
    )
