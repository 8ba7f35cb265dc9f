"""Agregador de rotas: registra todos os routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.events.router import router as events_router
from api.routes.health.router import router as health_router
from api.routes.items.router import router as items_router
from api.routes.notion.router import router as notion_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (/health, /ready)
    api_router.include_router(health_router, tags=["health"])

    # Snapshot do database (/items)
    api_router.include_router(items_router, tags=["items"])

    # Stream SSE (/events)
    api_router.include_router(events_router, tags=["events"])

    # Webhook Notion (/webhook)
    api_router.include_router(notion_router, tags=["notion"])

    return api_router
