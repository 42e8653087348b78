"""Testes das settings Discord, API de proxies e base."""

from __future__ import annotations

import pytest

from config.settings.base.core import _load_base_from_env
from config.settings.discord import DiscordSettings
from config.settings.discord import _load_from_env as load_discord_from_env
from config.settings.proxy_api import DEFAULT_CACHE_TTL_SECONDS, ProxyApiSettings
from config.settings.proxy_api import _load_from_env as load_proxy_from_env


class TestDiscordSettings:
    def test_invite_url_contains_application_id(self) -> None:
        settings = DiscordSettings(application_id="123456")
        assert settings.invite_url == "https://discord.com/oauth2/authorize?client_id=123456"

    def test_commands_endpoint(self) -> None:
        settings = DiscordSettings(application_id="42")
        assert settings.get_commands_endpoint() == (
            "https://discord.com/api/v10/applications/42/commands"
        )

    def test_commands_endpoint_requires_application_id(self) -> None:
        with pytest.raises(ValueError):
            DiscordSettings().get_commands_endpoint()

    def test_validate_reports_missing_credentials(self) -> None:
        errors = DiscordSettings().validate()
        assert "DISCORD_APPLICATION_ID não configurado" in errors
        assert "DISCORD_PUBLIC_KEY não configurado" in errors

    def test_bot_token_not_required_for_endpoint(self) -> None:
        assert DiscordSettings(application_id="1", public_key="ab").validate() == []

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_APPLICATION_ID", "app-1")
        monkeypatch.setenv("DISCORD_PUBLIC_KEY", "ff" * 32)
        monkeypatch.setenv("DISCORD_TOKEN", "tok")
        settings = load_discord_from_env()
        assert settings.application_id == "app-1"
        assert settings.public_key == "ff" * 32
        assert settings.bot_token == "tok"
        assert settings.max_attachment_bytes == 10 * 1024 * 1024


class TestProxyApiSettings:
    def test_default_ttl_is_two_hours(self) -> None:
        assert DEFAULT_CACHE_TTL_SECONDS == 7200
        assert ProxyApiSettings().cache_ttl_seconds == 7200

    def test_validate_requires_http_url(self) -> None:
        assert "PROXY_API_URL não configurado" in ProxyApiSettings().validate()
        assert "PROXY_API_URL deve ser http(s)" in ProxyApiSettings(api_url="ftp://x").validate()
        assert ProxyApiSettings(api_url="https://api.example/proxies").validate() == []

    def test_validate_rejects_unknown_backend(self) -> None:
        settings = ProxyApiSettings(api_url="https://x", cache_backend="disk")  # type: ignore[arg-type]
        assert "PROXY_CACHE_BACKEND deve ser 'memory' ou 'redis'" in settings.validate()

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROXY_API_URL", "https://api.example/proxies")
        monkeypatch.setenv("PROXY_CACHE_BACKEND", "REDIS")
        monkeypatch.setenv("PROXY_CACHE_TTL_SECONDS", "60")
        settings = load_proxy_from_env()
        assert settings.api_url == "https://api.example/proxies"
        assert settings.cache_backend == "redis"
        assert settings.cache_ttl_seconds == 60


class TestBaseSettings:
    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert _load_base_from_env().is_production

    def test_unknown_environment_defaults_to_development(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "qa")
        assert _load_base_from_env().is_development
