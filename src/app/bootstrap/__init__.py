"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e expõe
singletons do cache e do roteador de interações.

Uso:
    from app.bootstrap import initialize_app, get_interaction_router

    initialize_app()
    router = get_interaction_router()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_discord_settings,
    get_proxy_api_settings,
)

if TYPE_CHECKING:
    from app.protocols.proxy_cache import AsyncProxyCacheProtocol
    from app.services.interaction_router import InteractionRouter

# Nome do serviço para logs e métricas
SERVICE_NAME = "pyloto_proxy_bot"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"discord: {error}" for error in get_discord_settings().validate())
    errors.extend(f"proxy_api: {error}" for error in get_proxy_api_settings().validate())

    if get_proxy_api_settings().cache_backend == "redis" and not base.redis_url:
        errors.append("proxy_api: PROXY_CACHE_BACKEND=redis exige REDIS_URL")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Singletons (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_proxy_cache() -> AsyncProxyCacheProtocol:
    """Obtém cache do catálogo (singleton compartilhado entre requests)."""
    from app.bootstrap.dependencies import create_proxy_cache

    return create_proxy_cache()


@lru_cache(maxsize=1)
def get_interaction_router() -> InteractionRouter:
    """Obtém roteador de interações (singleton)."""
    from app.bootstrap.dependencies import create_interaction_router

    return create_interaction_router(cache=get_proxy_cache())
