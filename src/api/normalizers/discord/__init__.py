"""Normalizer Discord — payload de interação → modelos de domínio."""

from .extractor import MalformedInteractionError, extract_channel, extract_interaction

__all__ = [
    "MalformedInteractionError",
    "extract_channel",
    "extract_interaction",
]
