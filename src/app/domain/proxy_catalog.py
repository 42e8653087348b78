"""Catálogo categorizado de proxies retornado pela API upstream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class ProxyCatalog(BaseModel):
    """Listas de `host:port` por protocolo, sem prefixo de esquema.

    Apenas as quatro listas decidem se o catálogo é válido; metadados
    fora do formato esperado viram None.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    http: tuple[str, ...] = Field(..., description="Proxies HTTP.")
    https: tuple[str, ...] = Field(..., description="Proxies HTTPS.")
    socks4: tuple[str, ...] = Field(..., description="Proxies SOCKS4.")
    socks5: tuple[str, ...] = Field(..., description="Proxies SOCKS5.")
    update_time: float | None = Field(
        default=None,
        description="Epoch da última atualização publicada pela API.",
    )
    count: float | None = Field(default=None, description="Total informado pela API.")

    @field_validator("update_time", "count", mode="wrap")
    @classmethod
    def _drop_invalid_metadata(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


@dataclass(frozen=True, slots=True)
class ProxyCatalogSuccess:
    """Catálogo obtido (da API ou do cache)."""

    catalog: ProxyCatalog
    from_cache: bool = False


@dataclass(frozen=True, slots=True)
class ProxyCatalogFailure:
    """API indisponível ou resposta fora do contrato.

    Attributes:
        reason: Motivo curto para logs (nunca exibido ao usuário)
    """

    reason: str


ProxyCatalogResult = ProxyCatalogSuccess | ProxyCatalogFailure
