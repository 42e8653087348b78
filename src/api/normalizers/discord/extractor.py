"""Extrator de payloads de interação do Discord.

Campos usados:
- type: 1 (PING), 2 (APPLICATION_COMMAND), demais tipos
- data.name: nome do comando
- channel.type / channel.name: usados pela política de escopo
"""

from __future__ import annotations

from typing import Any

from app.constants.discord import ChannelType, InteractionType
from app.domain.interaction import (
    ChannelKind,
    ChannelRef,
    CommandInvocation,
    Handshake,
    Interaction,
    UnsupportedInteraction,
)


class MalformedInteractionError(ValueError):
    """Payload autenticado que não segue o formato de interação."""


_CHANNEL_KINDS: dict[int, ChannelKind] = {
    ChannelType.DM: ChannelKind.DIRECT_MESSAGE,
    ChannelType.GROUP_DM: ChannelKind.GROUP_DIRECT_MESSAGE,
}


def extract_channel(raw_channel: Any) -> ChannelRef:
    """Converte o objeto `channel` em ChannelRef.

    Ausência do objeto é tratada como canal de guild sem nome.
    """
    if not isinstance(raw_channel, dict):
        return ChannelRef(kind=ChannelKind.GUILD)

    channel_type = raw_channel.get("type")
    name = raw_channel.get("name")
    kind = ChannelKind.GUILD
    if isinstance(channel_type, int):
        kind = _CHANNEL_KINDS.get(channel_type, ChannelKind.GUILD)
    return ChannelRef(kind=kind, name=name if isinstance(name, str) else None)


def extract_interaction(payload: dict[str, Any]) -> Interaction:
    """Extrai a interação de domínio do payload já autenticado.

    Raises:
        MalformedInteractionError: Se `type` ausente ou comando sem nome
    """
    interaction_type = payload.get("type")
    if not isinstance(interaction_type, int) or isinstance(interaction_type, bool):
        raise MalformedInteractionError("missing_interaction_type")

    if interaction_type == InteractionType.PING:
        return Handshake()

    if interaction_type != InteractionType.APPLICATION_COMMAND:
        return UnsupportedInteraction(interaction_type=interaction_type)

    data = payload.get("data")
    command_name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(command_name, str) or not command_name:
        raise MalformedInteractionError("missing_command_name")

    return CommandInvocation(
        command_name=command_name,
        channel=extract_channel(payload.get("channel")),
    )
