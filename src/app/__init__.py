"""App: núcleo do sistema: estado de tempo real, serviços e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, singletons)
- domain/: modelos de domínio (Item)
- services/: fetcher paginado, debounce e fan-out SSE
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
