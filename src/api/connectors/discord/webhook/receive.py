"""Autenticação e parsing inicial do webhook de interações (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from app.constants.discord import SIGNATURE_HEADER, TIMESTAMP_HEADER

from ..signature import verify_interaction_signature

if TYPE_CHECKING:
    from starlette.datastructures import Headers


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Headers de assinatura ausentes ou assinatura inválida."""


class InvalidJsonError(WebhookRequestError):
    """Corpo autenticado que não é um objeto JSON."""


def parse_interaction_request(
    raw_body: bytes,
    headers: Headers,
    public_key: str,
) -> dict[str, Any]:
    """Valida assinatura e parseia o JSON da interação.

    A verificação acontece sobre os bytes brutos, antes de qualquer decode.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (lookup case-insensitive do Starlette)
        public_key: Chave pública Ed25519 da aplicação (hex)

    Raises:
        InvalidSignatureError: Se assinatura ausente ou inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        Payload da interação como dict
    """
    signature = headers.get(SIGNATURE_HEADER)
    timestamp = headers.get(TIMESTAMP_HEADER)
    if not signature or not timestamp:
        raise InvalidSignatureError("missing_signature_headers")

    if not verify_interaction_signature(raw_body, signature, timestamp, public_key):
        raise InvalidSignatureError("signature_mismatch")

    try:
        payload = json.loads(raw_body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
