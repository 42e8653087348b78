"""Connectors — adapters de borda para APIs externas.

Estrutura:
- discord/: verificação de assinatura e parsing de interações
- proxy_api/: gateway da API de proxies com cache read-through
"""

__all__: list[str] = []
