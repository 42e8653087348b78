"""Cliente HTTP para a API upstream de proxies.

Uma única chamada GET por comando: sem retry nem backoff.
Falhas viram HttpError sem dados do corpo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Accept": "application/json"}
    )
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProxyApiHttpClient:
    """Cliente GET JSON para a API de proxies.

    Args:
        config: Configuração HTTP
        client: AsyncClient compartilhado (opcional). Se None, um cliente
            é aberto e fechado a cada chamada.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def get_json(self, url: str) -> Any:
        """Executa GET e decodifica o JSON.

        Raises:
            HttpError: Status não-2xx, erro de transporte ou JSON inválido
        """
        response = await self._get(url)
        if not response.is_success:
            raise HttpError("http_status_error", status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise HttpError("invalid_json", status_code=response.status_code) from exc

    async def _get(self, url: str) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._client.get(
                    url,
                    headers=self._config.default_headers,
                    timeout=self._config.timeout_seconds,
                )
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                return await client.get(
                    url,
                    headers=self._config.default_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc
