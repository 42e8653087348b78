"""Endpoint de interações do Discord.

Endpoint:
- POST /interactions: recebe interações assinadas (PING e comandos)

Fluxo:
1. Lê o corpo bruto e valida a assinatura Ed25519 (401 se falhar)
2. Decodifica o JSON e extrai a interação (400 se malformado)
3. Roteia para o comando e codifica a resposta (JSON ou multipart)

Segurança:
- A assinatura cobre os bytes brutos; nada é decodificado antes dela
- Falhas de autenticação não expõem detalhes no corpo
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from api.connectors.discord.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_interaction_request,
)
from api.normalizers.discord import MalformedInteractionError, extract_interaction
from api.payload_builders.discord import WireResponse, build_response
from app.bootstrap import get_interaction_router
from app.domain.command_reply import ErrorReply
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_discord_settings

logger = logging.getLogger(__name__)

router = APIRouter()

MALFORMED_PAYLOAD_MESSAGE = "Malformed Payload"


def _to_response(wire: WireResponse) -> Response:
    """Converte a tripla codificada em Response do Starlette."""
    return Response(
        content=wire.body,
        status_code=wire.status_code,
        headers=wire.headers,
    )


@router.post("/interactions", response_model=None)
async def receive_interaction(request: Request) -> Response:
    """Recebimento de interações assinadas.

    Returns:
        200 com JSON ou multipart; 401 texto em assinatura inválida;
        400 `{"error": ...}` para payload malformado ou comando desconhecido.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        settings = get_discord_settings()

        # Body bruto: a assinatura cobre os bytes exatamente como recebidos
        raw_body = await request.body()

        try:
            payload = parse_interaction_request(
                raw_body=raw_body,
                headers=request.headers,
                public_key=settings.public_key,
            )
            interaction = extract_interaction(payload)

        except InvalidSignatureError as exc:
            logger.warning(
                "interaction_signature_invalid",
                extra={
                    "channel": "discord",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return Response(
                content="Bad request signature.",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        except (InvalidJsonError, MalformedInteractionError) as exc:
            logger.warning(
                "interaction_payload_malformed",
                extra={
                    "channel": "discord",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _to_response(
                build_response(
                    ErrorReply(code=status.HTTP_400_BAD_REQUEST, message=MALFORMED_PAYLOAD_MESSAGE)
                )
            )

        logger.info(
            "interaction_received",
            extra={
                "channel": "discord",
                "correlation_id": get_correlation_id(),
                "interaction_kind": type(interaction).__name__,
                "payload_size": len(raw_body),
            },
        )

        reply = await get_interaction_router().route(interaction)
        return _to_response(build_response(reply))

    finally:
        reset_correlation_id(token)
