"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class UpstreamUnavailableError(InfrastructureError):
    """API de proxies indisponível ou com resposta fora do contrato.

    Attributes:
        reason: Motivo curto, sem dados do corpo (ex: "http_status_502")
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
