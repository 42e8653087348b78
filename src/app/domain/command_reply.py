"""Respostas produzidas pelo roteador de interações.

Cada interação gera exatamente uma CommandReply, convertida em bytes
por api/payload_builders/discord.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Pong:
    """Resposta fixa ao handshake."""


@dataclass(frozen=True, slots=True)
class Ephemeral:
    """Mensagem visível apenas para quem invocou o comando."""

    text: str


@dataclass(frozen=True, slots=True)
class PublicWithAttachment:
    """Mensagem pública com um arquivo texto anexado.

    Attributes:
        text: Conteúdo da mensagem
        filename: Nome do anexo (ex: http.txt)
        content: Conteúdo do anexo
        description: Descrição exibida pela plataforma
    """

    text: str
    filename: str
    content: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class ErrorReply:
    """Erro de protocolo devolvido como `{"error": message}`."""

    code: int
    message: str


CommandReply = Pong | Ephemeral | PublicWithAttachment | ErrorReply
