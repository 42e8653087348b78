"""Testes dos encoders de resposta de interação (JSON e multipart)."""

from __future__ import annotations

import json

import pytest

from api.payload_builders.discord import (
    JSON_CONTENT_TYPE,
    FilePart,
    build_response,
    encode_json,
    encode_multipart,
)
from app.domain.command_reply import Ephemeral, ErrorReply, Pong, PublicWithAttachment


def _split_multipart(content_type: str, body: bytes) -> dict[str, tuple[dict[str, str], bytes]]:
    """Separa o corpo multipart em {nome_do_campo: (headers, conteúdo)}."""
    boundary = content_type.split("boundary=", 1)[1].strip('"').encode("ascii")
    parts: dict[str, tuple[dict[str, str], bytes]] = {}
    for chunk in body.split(b"--" + boundary):
        if not chunk or chunk.startswith(b"--"):
            continue
        raw_headers, _, content = chunk.removeprefix(b"\r\n").partition(b"\r\n\r\n")
        headers = {}
        for line in raw_headers.decode("utf-8").split("\r\n"):
            key, _, value = line.partition(":")
            headers[key.strip().lower()] = value.strip()
        name = headers["content-disposition"].split('name="', 1)[1].split('"', 1)[0]
        parts[name] = (headers, content.removesuffix(b"\r\n"))
    return parts


def test_pong() -> None:
    wire = build_response(Pong())

    assert wire.status_code == 200
    assert wire.content_type == JSON_CONTENT_TYPE
    assert json.loads(wire.body) == {"type": 1}


def test_ephemeral() -> None:
    wire = build_response(Ephemeral(text="Failed to fetch proxies."))

    assert wire.status_code == 200
    assert json.loads(wire.body) == {
        "type": 4,
        "data": {"content": "Failed to fetch proxies.", "flags": 64},
    }


def test_error_reply_uses_its_status() -> None:
    wire = build_response(ErrorReply(code=400, message="Unknown Type"))

    assert wire.status_code == 400
    assert wire.content_type == JSON_CONTENT_TYPE
    assert json.loads(wire.body) == {"error": "Unknown Type"}


def test_encode_json_keeps_utf8() -> None:
    wire = encode_json({"content": "👋"})
    assert "👋".encode() in wire.body


def test_public_with_attachment_is_multipart() -> None:
    reply = PublicWithAttachment(
        text="Here are your HTTP proxies!",
        filename="http.txt",
        content="1.2.3.4:80\n9.9.9.9:8080",
        description="HTTP Proxies",
    )

    wire = build_response(reply)

    assert wire.status_code == 200
    assert wire.content_type.startswith("multipart/form-data; boundary=")
    parts = _split_multipart(wire.content_type, wire.body)
    assert set(parts) == {"payload_json", "files[0]"}

    payload_headers, payload_raw = parts["payload_json"]
    assert payload_headers["content-type"] == "application/json"
    assert "filename=" not in payload_headers["content-disposition"]
    assert json.loads(payload_raw) == {
        "type": 4,
        "data": {
            "content": "Here are your HTTP proxies!",
            "attachments": [{"id": 0, "filename": "http.txt", "description": "HTTP Proxies"}],
        },
    }

    file_headers, file_content = parts["files[0]"]
    assert 'filename="http.txt"' in file_headers["content-disposition"]
    assert file_headers["content-type"] == "text/plain"
    assert file_content == b"1.2.3.4:80\n9.9.9.9:8080"


def test_encode_multipart_empty_file() -> None:
    wire = encode_multipart(
        {"type": 4},
        [FilePart(field_name="files[0]", filename="socks4.txt", content=b"")],
    )

    parts = _split_multipart(wire.content_type, wire.body)
    assert parts["files[0]"][1] == b""
    assert list(parts) == ["payload_json", "files[0]"]


def test_unknown_reply_raises() -> None:
    with pytest.raises(TypeError):
        build_response("pong")  # type: ignore[arg-type]
