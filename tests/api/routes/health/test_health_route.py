"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json

import pytest

from api.routes.health import router as health_router


@pytest.mark.asyncio
async def test_health_check() -> None:
    response = await health_router.health_check()

    assert response.status == "healthy"
    assert response.service == "notion-live-board"


@pytest.mark.asyncio
async def test_readiness_not_ready_without_store(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NOTION_TOKEN", raising=False)
    monkeypatch.delenv("NOTION_DATABASE_ID", raising=False)

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["notion_store"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_ready_with_store(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTION_TOKEN", "secret_token")
    monkeypatch.setenv("NOTION_DATABASE_ID", "db123")
    monkeypatch.setenv("NOTION_WEBHOOK_SECRET", "whsec")

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["webhook_signature"] == "enforced"
    assert payload["subscribers"] == 0
