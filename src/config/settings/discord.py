"""Settings específicas de Discord.

Configurações do endpoint de interações e do registro de comandos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Discord API
DISCORD_API_VERSION: str = "v10"
DISCORD_API_BASE_URL: str = "https://discord.com/api"
DISCORD_OAUTH_AUTHORIZE_URL: str = "https://discord.com/oauth2/authorize"

# Limite padrão de upload para anexos (servidores sem boost)
DEFAULT_MAX_ATTACHMENT_BYTES: int = 10 * 1024 * 1024


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        application_id: ID da aplicação Discord
        public_key: Chave pública Ed25519 (hex) para verificação de interações
        bot_token: Token do bot (usado apenas pelo registro de comandos)
        api_version: Versão da API
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para o registro de comandos
        max_attachment_bytes: Limite de upload documentado da plataforma
    """

    # Credenciais
    application_id: str = ""
    public_key: str = ""
    bot_token: str = ""

    # API
    api_version: str = DISCORD_API_VERSION
    api_base_url: str = DISCORD_API_BASE_URL
    request_timeout_seconds: float = 30.0

    # Anexos
    max_attachment_bytes: int = DEFAULT_MAX_ATTACHMENT_BYTES

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def invite_url(self) -> str:
        """URL de autorização OAuth2 para instalar a aplicação."""
        return f"{DISCORD_OAUTH_AUTHORIZE_URL}?client_id={self.application_id}"

    def get_commands_endpoint(self) -> str:
        """Retorna URL do registro global de comandos.

        Raises:
            ValueError: Se application_id não configurado.
        """
        if not self.application_id:
            raise ValueError("application_id é obrigatório")
        return f"{self.api_endpoint}/applications/{self.application_id}/commands"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do endpoint de interações.

        bot_token não é validado aqui: só o script de registro precisa dele.
        """
        errors: list[str] = []
        if not self.application_id:
            errors.append("DISCORD_APPLICATION_ID não configurado")
        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        if self.max_attachment_bytes <= 0:
            errors.append("DISCORD_MAX_ATTACHMENT_BYTES deve ser > 0")
        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    return DiscordSettings(
        application_id=os.getenv("DISCORD_APPLICATION_ID", ""),
        public_key=os.getenv("DISCORD_PUBLIC_KEY", ""),
        bot_token=os.getenv("DISCORD_TOKEN", ""),
        api_version=os.getenv("DISCORD_API_VERSION", DISCORD_API_VERSION),
        api_base_url=os.getenv("DISCORD_API_BASE_URL", DISCORD_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_attachment_bytes=int(
            os.getenv("DISCORD_MAX_ATTACHMENT_BYTES", str(DEFAULT_MAX_ATTACHMENT_BYTES))
        ),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
