"""Validação de assinatura Ed25519 das interações do Discord.

A plataforma assina `timestamp || corpo` com a chave privada da aplicação
e envia a assinatura (hex) em `X-Signature-Ed25519`. A verificação usa
os bytes brutos do corpo: qualquer decodificação prévia invalida a assinatura.
"""

from __future__ import annotations

import binascii
import logging
from functools import lru_cache

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def load_public_key(public_key_hex: str) -> Ed25519PublicKey:
    """Carrega a chave pública Ed25519 a partir do hex do portal.

    Raises:
        ValueError: Se o hex for inválido ou não tiver 32 bytes
    """
    try:
        raw_key = bytes.fromhex(public_key_hex.strip())
    except ValueError as exc:
        raise ValueError("public_key_not_hex") from exc
    return Ed25519PublicKey.from_public_bytes(raw_key)


def verify_interaction_signature(
    raw_body: bytes,
    signature: str | None,
    timestamp: str | None,
    public_key: str,
) -> bool:
    """Verifica a assinatura destacada de uma interação.

    Args:
        raw_body: Corpo bruto, exatamente como recebido
        signature: Header X-Signature-Ed25519 (hex)
        timestamp: Header X-Signature-Timestamp
        public_key: Chave pública da aplicação (hex)

    Returns:
        True somente se ambos os headers existem e a assinatura confere.
    """
    if not signature or not timestamp:
        return False

    try:
        key = load_public_key(public_key)
    except ValueError as exc:
        logger.error(
            "interaction_public_key_invalid",
            extra={"component": "signature", "error_type": type(exc).__name__},
        )
        return False

    try:
        signature_bytes = binascii.unhexlify(signature.strip())
    except (binascii.Error, ValueError):
        return False

    try:
        key.verify(signature_bytes, timestamp.encode("utf-8") + raw_body)
    except InvalidSignature:
        return False
    return True
