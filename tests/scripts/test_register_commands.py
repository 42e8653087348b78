"""Testes do script de registro de comandos."""

from __future__ import annotations

import json

import httpx
import pytest

import register_commands
from app.constants.discord_commands import build_all_command_descriptors
from config.settings import DiscordSettings

SETTINGS = DiscordSettings(application_id="42", bot_token="bot-token")


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_descriptors() -> None:
    commands = build_all_command_descriptors()

    assert [c["name"] for c in commands] == ["http", "https", "socks4", "socks5", "all", "invite"]
    assert all(c["type"] == 1 and c["contexts"] == [0, 1, 2] for c in commands)


def test_register_commands_puts_all_descriptors() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=[{"id": "1"}])

    commands = build_all_command_descriptors()
    result = register_commands.register_commands(SETTINGS, commands, client=_client(handler))

    assert result.ok
    assert result.body == [{"id": "1"}]
    assert seen["method"] == "PUT"
    assert seen["url"] == "https://discord.com/api/v10/applications/42/commands"
    assert seen["auth"] == "Bot bot-token"
    assert seen["body"] == commands


def test_register_commands_reports_error_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text='{"message": "401: Unauthorized"}')

    result = register_commands.register_commands(SETTINGS, [], client=_client(handler))

    assert not result.ok
    assert result.status_code == 401
    assert "401: Unauthorized" in (result.error or "")


def test_register_commands_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused")

    result = register_commands.register_commands(SETTINGS, [], client=_client(handler))

    assert not result.ok
    assert result.status_code is None
    assert "ConnectError" in (result.error or "")


def test_register_commands_requires_token() -> None:
    with pytest.raises(ValueError, match="DISCORD_TOKEN"):
        register_commands.register_commands(DiscordSettings(application_id="42"), [])


def test_main_dry_run_prints_commands(capsys: pytest.CaptureFixture[str]) -> None:
    assert register_commands.main([]) == 0
    assert '"name": "invite"' in capsys.readouterr().out


def test_main_apply_without_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        register_commands, "get_discord_settings", lambda: DiscordSettings(application_id="42")
    )
    assert register_commands.main(["--apply"]) == 2


def test_main_apply_success(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(register_commands, "get_discord_settings", lambda: SETTINGS)
    monkeypatch.setattr(
        register_commands,
        "register_commands",
        lambda settings, commands: register_commands.RegistrationResult(ok=True, status_code=200, body=[]),
    )
    assert register_commands.main(["--apply"]) == 0
