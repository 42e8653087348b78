"""Entrypoint da aplicação Pyloto Proxy Bot.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import get_proxy_cache, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_proxy_api_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o cache do catálogo

    Shutdown:
    - Fecha a conexão Redis quando o cache é compartilhado
    """
    logger.info("app_starting", extra={"service": "pyloto-proxy-bot"})
    validate_runtime_settings()

    try:
        get_proxy_cache()
    except Exception as exc:
        logger.warning("proxy_cache_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"service": "pyloto-proxy-bot"})
    if get_proxy_api_settings().cache_backend == "redis":
        from app.bootstrap.clients import create_async_redis_client

        try:
            await create_async_redis_client().aclose()
        except Exception as exc:
            logger.warning("redis_close_failed", extra={"error_type": type(exc).__name__})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Pyloto Proxy Bot",
        description="Endpoint de interações do Discord que publica listas de proxies",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "pyloto-proxy-bot"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Pyloto Proxy Bot in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
