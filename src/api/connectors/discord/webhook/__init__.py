"""Webhook de interações: assinatura e parsing seguro."""

from ..signature import verify_interaction_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_interaction_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "WebhookRequestError",
    "parse_interaction_request",
    "verify_interaction_signature",
]
