"""App — núcleo do bot: roteamento, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- services/: roteador de interações
- domain/: interações, catálogo de proxies e respostas
- infra/: implementações concretas do cache
- protocols/: contratos/interfaces
- observability/: correlation id e métricas
- constants/: constantes da plataforma e descritores de comandos

Padrão: app decide; api adapta; config configura; utils apoia.
"""
