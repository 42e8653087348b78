"""API — camada de borda.

Responsabilidades:
- Receber interações assinadas (webhook)
- Validar assinaturas e payloads
- Normalizar dados para modelos internos
- Codificar respostas no formato da plataforma
- Consultar a API upstream de proxies

Subpastas:
- connectors/: adapters HTTP (Discord, API de proxies)
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: codificação das respostas (JSON e multipart)
- routes/: endpoints HTTP (interações, health)

NÃO PODE conter: regras de escopo, dispatch de comandos.
"""
