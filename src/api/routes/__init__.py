"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (items, events, webhook, health)
- Validação inicial de request (headers, corpo bruto)
- Delegação para connectors/services
- Respostas HTTP apropriadas

Estrutura:
- routes/items/: snapshot do database
- routes/events/: stream SSE
- routes/notion/: webhook do Notion
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
