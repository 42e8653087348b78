"""Descritores dos comandos de barra publicados no registro global.

Os nomes aqui são o contrato entre o roteador de interações e o
script de registro (scripts/register_commands.py).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from app.constants.discord import ApplicationCommandType, InteractionContextType


class CommandName(StrEnum):
    """Comandos reconhecidos pelo bot."""

    HTTP = "http"
    HTTPS = "https"
    SOCKS4 = "socks4"
    SOCKS5 = "socks5"
    ALL = "all"
    INVITE = "invite"


_ALL_CONTEXTS = [
    InteractionContextType.GUILD,
    InteractionContextType.BOT_DM,
    InteractionContextType.PRIVATE_CHANNEL,
]

_DESCRIPTIONS: dict[CommandName, str] = {
    CommandName.HTTP: "Post http proxies to this channel.",
    CommandName.HTTPS: "Post https proxies to this channel.",
    CommandName.SOCKS4: "Post socks4 proxies to this channel.",
    CommandName.SOCKS5: "Post socks5 proxies to this channel.",
    CommandName.ALL: "Post http, https, socks4 and socks5 proxies to this channel.",
    CommandName.INVITE: "Get a link to install this app in your server or DMs.",
}


def build_command_descriptor(name: CommandName) -> dict[str, Any]:
    """Monta o JSON de um comando no formato do registro da plataforma."""
    return {
        "name": name.value,
        "description": _DESCRIPTIONS[name],
        "type": int(ApplicationCommandType.CHAT_INPUT),
        "contexts": [int(context) for context in _ALL_CONTEXTS],
    }


def build_all_command_descriptors() -> list[dict[str, Any]]:
    """Retorna os seis descritores na ordem de publicação."""
    return [build_command_descriptor(name) for name in CommandName]
