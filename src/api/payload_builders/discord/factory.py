"""Seleção do encoder pela variante de CommandReply.

Somente duas formas de fio existem: JSON puro e multipart com um anexo.
"""

from __future__ import annotations

from typing import Any

from app.constants.discord import InteractionResponseType, MessageFlags
from app.domain.command_reply import (
    CommandReply,
    Ephemeral,
    ErrorReply,
    Pong,
    PublicWithAttachment,
)

from .json_body import encode_json
from .multipart import FilePart, encode_multipart
from .wire import WireResponse


def build_pong_body() -> dict[str, Any]:
    return {"type": int(InteractionResponseType.PONG)}


def build_ephemeral_body(text: str) -> dict[str, Any]:
    return {
        "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
        "data": {
            "content": text,
            "flags": int(MessageFlags.EPHEMERAL),
        },
    }


def build_attachment_body(reply: PublicWithAttachment) -> dict[str, Any]:
    return {
        "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
        "data": {
            "content": reply.text,
            "attachments": [
                {
                    "id": 0,
                    "filename": reply.filename,
                    "description": reply.description,
                }
            ],
        },
    }


def build_error_body(message: str) -> dict[str, Any]:
    return {"error": message}


def build_response(reply: CommandReply) -> WireResponse:
    """Codifica a resposta no formato exigido pela plataforma.

    Raises:
        TypeError: Se receber algo que não é CommandReply
    """
    if isinstance(reply, Pong):
        return encode_json(build_pong_body())

    if isinstance(reply, Ephemeral):
        return encode_json(build_ephemeral_body(reply.text))

    if isinstance(reply, ErrorReply):
        return encode_json(build_error_body(reply.message), status_code=reply.code)

    if isinstance(reply, PublicWithAttachment):
        return encode_multipart(
            build_attachment_body(reply),
            [
                FilePart(
                    field_name="files[0]",
                    filename=reply.filename,
                    content=reply.content.encode("utf-8"),
                )
            ],
        )

    raise TypeError(f"Resposta não suportada: {type(reply).__name__}")
