"""Testes do endpoint POST /webhook."""

from __future__ import annotations

import asyncio
import hashlib
import hmac
import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.notion import webhook
from app.services.notification_hub import NotificationHub

SECRET = "secret_webhook"


def _build_request(
    *,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook",
        "raw_path": b"/webhook",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _sign(body: bytes, secret: str = SECRET) -> str:
    return "sha256=" + hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def _body(response) -> dict[str, object]:
    return json.loads(response.body.decode("utf-8"))


@pytest.fixture
def hub(monkeypatch: pytest.MonkeyPatch) -> NotificationHub:
    notification_hub = NotificationHub(debounce_seconds=0.2)
    monkeypatch.setattr(webhook, "get_notification_hub", lambda: notification_hub)
    return notification_hub


def _use_secret(monkeypatch: pytest.MonkeyPatch, secret: str = "", mode: str = "raw") -> None:
    monkeypatch.setattr(
        webhook,
        "get_notion_settings",
        lambda: SimpleNamespace(webhook_secret=secret, webhook_signature_mode=mode),
    )


@pytest.mark.asyncio
async def test_verification_challenge(monkeypatch: pytest.MonkeyPatch, hub: NotificationHub) -> None:
    _use_secret(monkeypatch, "")

    request = _build_request(body=b'{"verification_token": "secret_tok"}')
    response = await webhook.receive_webhook(request)

    assert response.status_code == 200
    assert _body(response) == {"ok": True, "step": "verification"}
    assert hub.scheduler.pending is False


@pytest.mark.asyncio
async def test_signature_mismatch_is_accepted_but_ignored(
    monkeypatch: pytest.MonkeyPatch, hub: NotificationHub
) -> None:
    _use_secret(monkeypatch, SECRET)
    subscriber = hub.subscribe()
    await subscriber.next_frame()

    body = b'{"type": "page.content_updated"}'
    request = _build_request(body=body, headers={"X-Notion-Signature": _sign(b"{}")})
    response = await webhook.receive_webhook(request)
    await asyncio.sleep(0.3)

    assert response.status_code == 202
    assert _body(response) == {"ok": False, "reason": "signature_mismatch"}
    assert hub.scheduler.pending is False
    assert subscriber.pending_frames() == 0


@pytest.mark.asyncio
async def test_missing_signature_is_signature_mismatch(
    monkeypatch: pytest.MonkeyPatch, hub: NotificationHub
) -> None:
    _use_secret(monkeypatch, SECRET)

    response = await webhook.receive_webhook(_build_request(body=b"{}"))

    assert response.status_code == 202
    assert _body(response)["reason"] == "signature_mismatch"


@pytest.mark.asyncio
async def test_signed_webhooks_coalesce_into_one_reload(
    monkeypatch: pytest.MonkeyPatch, hub: NotificationHub
) -> None:
    _use_secret(monkeypatch, SECRET)
    subscriber = hub.subscribe()
    await subscriber.next_frame()
    loop = asyncio.get_running_loop()

    started = loop.time()
    for index in range(3):
        body = json.dumps({"type": "page.properties_updated", "attempt": index}).encode()
        request = _build_request(body=body, headers={"x-notion-signature": _sign(body)})
        response = await webhook.receive_webhook(request)
        assert response.status_code == 200
        assert _body(response) == {"ok": True}
        if index < 2:
            await asyncio.sleep(0.05)

    frame = await asyncio.wait_for(subscriber.next_frame(), timeout=1.0)
    elapsed = loop.time() - started

    assert frame.startswith("event: reload\n")
    assert 0.27 <= elapsed <= 0.45
    await asyncio.sleep(0.3)
    assert subscriber.pending_frames() == 0


@pytest.mark.asyncio
async def test_permissive_mode_schedules_reload(
    monkeypatch: pytest.MonkeyPatch, hub: NotificationHub
) -> None:
    _use_secret(monkeypatch, "")

    response = await webhook.receive_webhook(_build_request(body=b'{"type": "page.created"}'))

    assert response.status_code == 200
    assert _body(response) == {"ok": True}
    assert hub.scheduler.pending is True
    hub.scheduler.cancel()


@pytest.mark.asyncio
async def test_legacy_minified_signature_mode(
    monkeypatch: pytest.MonkeyPatch, hub: NotificationHub
) -> None:
    _use_secret(monkeypatch, SECRET, mode="minified")
    body = b'{"type": "page.created", "entity": {"id": "p1"}}'
    legacy = json.dumps(json.loads(body), separators=(",", ":")).encode()

    request = _build_request(body=body, headers={"x-notion-signature": _sign(legacy)})
    response = await webhook.receive_webhook(request)

    assert response.status_code == 200
    assert hub.scheduler.pending is True
    hub.scheduler.cancel()


@pytest.mark.asyncio
async def test_signed_json_array_schedules_reload(
    monkeypatch: pytest.MonkeyPatch, hub: NotificationHub
) -> None:
    _use_secret(monkeypatch, SECRET)
    body = b'[{"type": "page.created"}]'

    request = _build_request(body=body, headers={"x-notion-signature": _sign(body)})
    response = await webhook.receive_webhook(request)

    assert response.status_code == 200
    assert _body(response) == {"ok": True}
    assert hub.scheduler.pending is True
    hub.scheduler.cancel()


@pytest.mark.asyncio
async def test_permissive_json_array_schedules_reload(
    monkeypatch: pytest.MonkeyPatch, hub: NotificationHub
) -> None:
    _use_secret(monkeypatch, "")

    response = await webhook.receive_webhook(_build_request(body=b"[1, 2]"))

    assert response.status_code == 200
    assert _body(response) == {"ok": True}
    assert hub.scheduler.pending is True
    hub.scheduler.cancel()


@pytest.mark.asyncio
async def test_invalid_json_returns_400(monkeypatch: pytest.MonkeyPatch, hub: NotificationHub) -> None:
    _use_secret(monkeypatch, "")

    response = await webhook.receive_webhook(_build_request(body=b"{invalid"))

    assert response.status_code == 400
    assert _body(response) == {"ok": False, "reason": "invalid_json"}


@pytest.mark.asyncio
async def test_unexpected_error_returns_500(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_secret(monkeypatch, "")

    def _broken_hub():
        raise RuntimeError("hub unavailable")

    monkeypatch.setattr(webhook, "get_notification_hub", _broken_hub)

    response = await webhook.receive_webhook(_build_request(body=b"{}"))

    assert response.status_code == 500
    assert _body(response) == {"ok": False}
