"""Observabilidade — correlation_id e métricas via logs estruturados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_cache_lookup
"""

from app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_cache_lookup, record_latency

__all__ = [
    "get_correlation_id",
    "record_cache_lookup",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
