"""Connector da API upstream de proxies."""

from .gateway import ProxyGateway, parse_proxy_api_response
from .http_client import HttpClientConfig, HttpError, ProxyApiHttpClient

__all__ = [
    "HttpClientConfig",
    "HttpError",
    "ProxyApiHttpClient",
    "ProxyGateway",
    "parse_proxy_api_response",
]
