"""Modelos de domínio para interações já autenticadas.

Uma interação é criada a partir do corpo verificado, roteada e descartada
dentro do mesmo ciclo request/response.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ChannelKind(StrEnum):
    """Classificação do canal usada pela política de escopo."""

    DIRECT_MESSAGE = "direct_message"
    GROUP_DIRECT_MESSAGE = "group_direct_message"
    GUILD = "guild"


@dataclass(frozen=True, slots=True)
class ChannelRef:
    """Canal onde o comando foi invocado."""

    kind: ChannelKind
    name: str | None = None

    @property
    def is_private(self) -> bool:
        """True para DM e DM em grupo."""
        return self.kind in (ChannelKind.DIRECT_MESSAGE, ChannelKind.GROUP_DIRECT_MESSAGE)


@dataclass(frozen=True, slots=True)
class Handshake:
    """PING da plataforma durante a configuração do webhook."""


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    """Comando de barra invocado por um usuário.

    Attributes:
        command_name: Nome como entregue pela plataforma (sem normalização)
        channel: Canal de origem
    """

    command_name: str
    channel: ChannelRef


@dataclass(frozen=True, slots=True)
class UnsupportedInteraction:
    """Qualquer outro tipo de interação (componentes, autocomplete, modais)."""

    interaction_type: int


Interaction = Handshake | CommandInvocation | UnsupportedInteraction
