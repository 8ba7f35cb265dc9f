"""Router principal do Notion: agrega os endpoints do webhook."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.notion.webhook import router as webhook_router

router = APIRouter()

router.include_router(webhook_router)
