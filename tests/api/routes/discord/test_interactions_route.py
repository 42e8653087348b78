"""Testes da rota POST /interactions."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from api.routes.discord import interactions
from app.domain.command_reply import Ephemeral, ErrorReply, Pong
from app.domain.interaction import ChannelKind, CommandInvocation, Handshake


def _build_request(*, body: bytes = b"", headers: dict[str, str] | None = None) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/interactions",
        "raw_path": b"/interactions",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def router_mock(monkeypatch: pytest.MonkeyPatch, signer) -> AsyncMock:
    router = SimpleNamespace(route=AsyncMock(return_value=Pong()))
    monkeypatch.setattr(
        interactions,
        "get_discord_settings",
        lambda: SimpleNamespace(public_key=signer.public_key_hex),
    )
    monkeypatch.setattr(interactions, "get_interaction_router", lambda: router)
    return router.route


@pytest.mark.asyncio
async def test_missing_signature_headers_returns_401(router_mock: AsyncMock) -> None:
    response = await interactions.receive_interaction(_build_request(body=b'{"type": 1}'))

    assert response.status_code == 401
    assert response.body == b"Bad request signature."
    assert response.headers["content-type"].startswith("text/plain")
    router_mock.assert_not_awaited()


@pytest.mark.asyncio
async def test_tampered_body_returns_401(router_mock: AsyncMock, signer) -> None:
    headers = signer.sign(b'{"type": 1}')
    request = _build_request(body=b'{"type": 2}', headers=headers)

    response = await interactions.receive_interaction(request)

    assert response.status_code == 401
    router_mock.assert_not_awaited()


@pytest.mark.asyncio
async def test_handshake_returns_pong(router_mock: AsyncMock, signer) -> None:
    body = b'{"type": 1}'
    response = await interactions.receive_interaction(
        _build_request(body=body, headers=signer.sign(body))
    )

    assert response.status_code == 200
    assert json.loads(response.body) == {"type": 1}
    router_mock.assert_awaited_once_with(Handshake())


@pytest.mark.asyncio
async def test_handshake_ignores_extra_fields(router_mock: AsyncMock, signer) -> None:
    body = json.dumps(
        {
            "type": 1,
            "id": "1234",
            "data": {"name": "http"},
            "channel": {"type": 0, "name": "general"},
            "application_id": "42",
        }
    ).encode("utf-8")

    response = await interactions.receive_interaction(
        _build_request(body=body, headers=signer.sign(body))
    )

    assert response.status_code == 200
    assert response.body == b'{"type":1}'
    router_mock.assert_awaited_once_with(Handshake())


@pytest.mark.asyncio
async def test_command_is_routed(router_mock: AsyncMock, signer) -> None:
    router_mock.return_value = Ephemeral(text="https://discord.com/oauth2/authorize?client_id=1")
    body = json.dumps(
        {"type": 2, "data": {"name": "invite"}, "channel": {"type": 1}}
    ).encode("utf-8")

    response = await interactions.receive_interaction(
        _build_request(body=body, headers=signer.sign(body))
    )

    assert response.status_code == 200
    assert json.loads(response.body)["data"]["flags"] == 64
    invocation = router_mock.await_args.args[0]
    assert isinstance(invocation, CommandInvocation)
    assert invocation.command_name == "invite"
    assert invocation.channel.kind is ChannelKind.DIRECT_MESSAGE


@pytest.mark.asyncio
async def test_unknown_command_returns_400(router_mock: AsyncMock, signer) -> None:
    router_mock.return_value = ErrorReply(code=400, message="Unknown Type")
    body = json.dumps(
        {"type": 2, "data": {"name": "foo"}, "channel": {"type": 0, "name": "proxy"}}
    ).encode("utf-8")

    response = await interactions.receive_interaction(
        _build_request(body=body, headers=signer.sign(body))
    )

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Unknown Type"}


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"{not json", b'{"type": 2}', b"[1, 2]"])
async def test_malformed_payload_returns_400(
    router_mock: AsyncMock, signer, body: bytes
) -> None:
    response = await interactions.receive_interaction(
        _build_request(body=body, headers=signer.sign(body))
    )

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Malformed Payload"}
    router_mock.assert_not_awaited()
