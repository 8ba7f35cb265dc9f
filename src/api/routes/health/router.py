"""Endpoints de health check (liveness/readiness)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import get_notification_hub
from config.settings import get_notion_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "notion-live-board"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: pronto quando há credenciais para consultar o database.

    Não consulta o Notion (cada consulta custa rate limit); só valida config.
    """
    settings = get_notion_settings()
    store_configured = settings.is_store_configured

    payload = {
        "status": "ready" if store_configured else "not_ready",
        "checks": {
            "notion_store": "ok" if store_configured else "not_configured",
            "webhook_signature": "enforced" if settings.webhook_secret else "permissive",
        },
        "subscribers": get_notification_hub().subscriber_count,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not store_configured:
        logger.warning("readiness_store_not_configured")
    return JSONResponse(content=payload, status_code=200 if store_configured else 503)
