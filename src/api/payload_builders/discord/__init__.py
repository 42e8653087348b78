"""Builders de resposta para o endpoint de interações do Discord."""

from .factory import build_response
from .json_body import JSON_CONTENT_TYPE, encode_json
from .multipart import FilePart, encode_multipart
from .wire import WireResponse

__all__ = [
    "JSON_CONTENT_TYPE",
    "FilePart",
    "WireResponse",
    "build_response",
    "encode_json",
    "encode_multipart",
]
