"""Payload builders — codificação das respostas de interação.

Estrutura:
- discord/: JSON puro e multipart/form-data com anexo
"""

__all__: list[str] = []
