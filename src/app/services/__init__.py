"""Serviços de aplicação.

Unidades de orquestração sem IO direto; o IO fica atrás dos protocolos.
"""

from app.services.interaction_router import InteractionRouter, InteractionRouterConfig

__all__ = [
    "InteractionRouter",
    "InteractionRouterConfig",
]
