"""Codificação JSON pura das respostas de interação."""

from __future__ import annotations

import json
from typing import Any

from .wire import WireResponse

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"


def encode_json(body: dict[str, Any], status_code: int = 200) -> WireResponse:
    """Serializa o corpo como JSON compacto UTF-8.

    Args:
        body: Objeto de resposta (resposta de interação ou `{"error": ...}`)
        status_code: Status HTTP

    Returns:
        WireResponse com Content-Type JSON
    """
    payload = json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    return WireResponse(
        status_code=status_code,
        headers={"Content-Type": JSON_CONTENT_TYPE},
        body=payload,
    )
