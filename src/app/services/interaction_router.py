"""Roteador de interações — máquina de estados por request.

Ordem fixa das verificações:
1. Handshake → Pong
2. Comando `invite` → link de autorização (qualquer canal, sem upstream)
3. Política de escopo (DM, DM em grupo ou canal chamado `proxy`)
4. Busca do catálogo no gateway
5. Dispatch pelo nome do comando (case-insensitive)

Cada interação produz exatamente uma CommandReply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.constants.discord import PROXY_CHANNEL_NAME
from app.constants.discord_commands import CommandName
from app.domain.command_reply import (
    CommandReply,
    Ephemeral,
    ErrorReply,
    Pong,
    PublicWithAttachment,
)
from app.domain.interaction import (
    ChannelRef,
    CommandInvocation,
    Handshake,
    Interaction,
    UnsupportedInteraction,
)
from app.domain.proxy_catalog import ProxyCatalog, ProxyCatalogFailure
from config.settings.discord import DEFAULT_MAX_ATTACHMENT_BYTES

if TYPE_CHECKING:
    from app.protocols.proxy_gateway import ProxyGatewayProtocol

logger = logging.getLogger(__name__)

WRONG_CHANNEL_MESSAGE = "This command can only be used in a #proxy channel."
FETCH_FAILED_MESSAGE = "Failed to fetch proxies."
UNKNOWN_TYPE_MESSAGE = "Unknown Type"


@dataclass(frozen=True, slots=True)
class InteractionRouterConfig:
    """Configuração imutável montada no startup.

    Attributes:
        invite_url: URL OAuth2 com o application_id
        max_attachment_bytes: Limite documentado de upload (apenas alerta)
    """

    invite_url: str
    max_attachment_bytes: int = DEFAULT_MAX_ATTACHMENT_BYTES


@dataclass(frozen=True, slots=True)
class _CategoryCommand:
    label: str
    scheme: str


# Categoria → (rótulo exibido, esquema usado no comando `all`), na ordem do arquivo
_CATEGORIES: dict[CommandName, _CategoryCommand] = {
    CommandName.HTTP: _CategoryCommand(label="HTTP", scheme="http://"),
    CommandName.HTTPS: _CategoryCommand(label="HTTPS", scheme="https://"),
    CommandName.SOCKS4: _CategoryCommand(label="SOCKS4", scheme="socks4://"),
    CommandName.SOCKS5: _CategoryCommand(label="SOCKS5", scheme="socks5://"),
}


def is_channel_allowed(channel: ChannelRef) -> bool:
    """Política de escopo: DM, DM em grupo ou canal com nome exato `proxy`."""
    return channel.is_private or channel.name == PROXY_CHANNEL_NAME


def category_entries(catalog: ProxyCatalog, command: CommandName) -> tuple[str, ...]:
    """Retorna as entradas da categoria correspondente ao comando."""
    return getattr(catalog, command.value)


def render_category(catalog: ProxyCatalog, command: CommandName) -> str:
    """Lista `host:port` separada por quebra de linha, sem esquema."""
    return "\n".join(category_entries(catalog, command))


def render_all(catalog: ProxyCatalog) -> str:
    """Quatro blocos com esquema, cada um separado por quebra de linha."""
    blocks = [
        "\n".join(f"{category.scheme}{entry}" for entry in category_entries(catalog, command))
        for command, category in _CATEGORIES.items()
    ]
    return "\n".join(blocks)


def build_proxy_reply(catalog: ProxyCatalog, command_name: str) -> CommandReply:
    """Transforma o catálogo na resposta do comando (case-insensitive)."""
    try:
        command = CommandName(command_name.lower())
    except ValueError:
        return ErrorReply(code=400, message=UNKNOWN_TYPE_MESSAGE)

    if command in _CATEGORIES:
        label = _CATEGORIES[command].label
        return PublicWithAttachment(
            text=f"Here are your {label} proxies!",
            filename=f"{command.value}.txt",
            content=render_category(catalog, command),
            description=f"{label} Proxies",
        )

    if command is CommandName.ALL:
        return PublicWithAttachment(
            text="Here are your URL proxies!",
            filename="proxies.txt",
            content=render_all(catalog),
            description="URL Proxies",
        )

    # `invite` já foi tratado antes do escopo; aqui só chega com outra caixa
    return ErrorReply(code=400, message=UNKNOWN_TYPE_MESSAGE)


class InteractionRouter:
    """Classifica a interação e produz a CommandReply.

    Args:
        gateway: Fonte do catálogo de proxies
        config: Configuração imutável do roteador
    """

    def __init__(
        self,
        gateway: ProxyGatewayProtocol,
        config: InteractionRouterConfig,
    ) -> None:
        self._gateway = gateway
        self._config = config

    async def route(self, interaction: Interaction) -> CommandReply:
        """Executa a máquina de estados de uma interação."""
        if isinstance(interaction, Handshake):
            logger.info("interaction_handshake")
            return Pong()

        if isinstance(interaction, UnsupportedInteraction):
            logger.warning(
                "interaction_type_unsupported",
                extra={"interaction_type": interaction.interaction_type},
            )
            return ErrorReply(code=400, message=UNKNOWN_TYPE_MESSAGE)

        return await self._route_command(interaction)

    async def _route_command(self, invocation: CommandInvocation) -> CommandReply:
        command_name = invocation.command_name

        if command_name == CommandName.INVITE.value:
            logger.info("interaction_routed", extra={"command": command_name, "outcome": "invite"})
            return Ephemeral(text=self._config.invite_url)

        if not is_channel_allowed(invocation.channel):
            logger.info(
                "interaction_rejected_by_scope",
                extra={"command": command_name, "channel_kind": invocation.channel.kind.value},
            )
            return Ephemeral(text=WRONG_CHANNEL_MESSAGE)

        result = await self._gateway.fetch()
        if isinstance(result, ProxyCatalogFailure):
            logger.warning(
                "interaction_upstream_unavailable",
                extra={"command": command_name, "reason": result.reason},
            )
            return Ephemeral(text=FETCH_FAILED_MESSAGE)

        reply = build_proxy_reply(result.catalog, command_name)
        if isinstance(reply, PublicWithAttachment):
            self._warn_if_oversized(reply)
        logger.info(
            "interaction_routed",
            extra={
                "command": command_name,
                "outcome": type(reply).__name__,
                "from_cache": result.from_cache,
            },
        )
        return reply

    def _warn_if_oversized(self, reply: PublicWithAttachment) -> None:
        size = len(reply.content.encode("utf-8"))
        if size > self._config.max_attachment_bytes:
            logger.warning(
                "attachment_exceeds_platform_limit",
                extra={
                    "attachment_filename": reply.filename,
                    "size_bytes": size,
                    "limit_bytes": self._config.max_attachment_bytes,
                },
            )
