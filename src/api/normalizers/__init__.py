"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- discord/: payload de interação → Interaction
"""

from .discord import MalformedInteractionError, extract_channel, extract_interaction

__all__ = [
    "MalformedInteractionError",
    "extract_channel",
    "extract_interaction",
]
