"""Codificação multipart/form-data para respostas com anexos.

Formato aceito pela plataforma:
- parte `payload_json`: corpo da resposta em JSON (application/json)
- partes `files[n]`: conteúdo dos anexos referenciados por `attachments[].id`

A serialização usa o encoder multipart do httpx, sem IO.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx

from .wire import WireResponse

# URL fictícia: o request nunca é enviado, serve apenas para codificar o corpo
_ENCODER_URL = "http://multipart.invalid/"
PAYLOAD_JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True, slots=True)
class FilePart:
    """Arquivo anexado à resposta.

    Attributes:
        field_name: Nome do campo (ex: files[0])
        filename: Nome do arquivo exibido
        content: Conteúdo bruto
        content_type: MIME do arquivo
    """

    field_name: str
    filename: str
    content: bytes
    content_type: str = "text/plain"


def encode_multipart(
    body: dict[str, Any],
    files: list[FilePart],
    status_code: int = 200,
) -> WireResponse:
    """Monta corpo multipart com `payload_json` e os arquivos.

    Returns:
        WireResponse com Content-Type multipart/form-data e boundary
    """
    payload_json = json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    # Sem filename: a parte é um campo JSON, não um anexo
    request = httpx.Request(
        "POST",
        _ENCODER_URL,
        files=[
            ("payload_json", (None, payload_json, PAYLOAD_JSON_CONTENT_TYPE)),
            *(
                (part.field_name, (part.filename, part.content, part.content_type))
                for part in files
            ),
        ],
    )
    encoded = request.read()
    return WireResponse(
        status_code=status_code,
        headers={"Content-Type": request.headers["Content-Type"]},
        body=encoded,
    )
