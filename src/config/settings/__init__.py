"""Agregador de settings do Pyloto Proxy Bot.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.discord import (
    DISCORD_API_BASE_URL,
    DISCORD_API_VERSION,
    DiscordSettings,
    get_discord_settings,
)

# Upstream settings
from config.settings.proxy_api import (
    DEFAULT_CACHE_TTL_SECONDS,
    ProxyApiSettings,
    ProxyCacheBackend,
    get_proxy_api_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CACHE_TTL_SECONDS",
    "DISCORD_API_BASE_URL",
    "DISCORD_API_VERSION",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    # Upstream
    "ProxyApiSettings",
    "ProxyCacheBackend",
    "get_base_settings",
    "get_discord_settings",
    "get_proxy_api_settings",
]
