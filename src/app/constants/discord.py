"""Enums e constantes do protocolo de interações do Discord (API v10)."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class InteractionType(IntEnum):
    """Tipos de interação recebidos em POST /interactions."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionResponseType(IntEnum):
    """Tipos de resposta a uma interação."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class ChannelType(IntEnum):
    """Tipos de canal relevantes para a política de escopo."""

    GUILD_TEXT = 0
    DM = 1
    GROUP_DM = 3


class MessageFlags(IntFlag):
    """Flags de mensagem usadas nas respostas."""

    EPHEMERAL = 1 << 6


class ApplicationCommandType(IntEnum):
    """Tipos de comando de aplicação."""

    CHAT_INPUT = 1


class InteractionContextType(IntEnum):
    """Contextos onde um comando pode ser invocado."""

    GUILD = 0
    BOT_DM = 1
    PRIVATE_CHANNEL = 2


# Headers de assinatura enviados pela plataforma
SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"

# Nome literal do canal de guild onde comandos de proxy são permitidos
PROXY_CHANNEL_NAME = "proxy"
