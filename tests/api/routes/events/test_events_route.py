"""Testes do stream SSE GET /events."""

from __future__ import annotations

import asyncio

import pytest

from api.routes.events import router as events_router
from app.services.notification_hub import NotificationHub


@pytest.mark.asyncio
async def test_subscribe_streams_hello_then_broadcasts(monkeypatch: pytest.MonkeyPatch) -> None:
    hub = NotificationHub()
    monkeypatch.setattr(events_router, "get_notification_hub", lambda: hub)

    response = await events_router.subscribe_events()
    stream = response.body_iterator

    assert response.media_type == "text/event-stream"
    assert response.headers["cache-control"] == "no-cache, no-transform"

    hello = await asyncio.wait_for(stream.__anext__(), timeout=0.5)
    assert hello == 'event: hello\ndata: {"ok":true}\n\n'
    assert hub.subscriber_count == 1

    hub.broadcast_hub.broadcast("reload", {"t": 42})
    reload = await asyncio.wait_for(stream.__anext__(), timeout=0.5)
    assert reload == 'event: reload\ndata: {"t":42}\n\n'

    await stream.aclose()

    assert hub.subscriber_count == 0
    assert hub.broadcast_hub.broadcast("reload", {"t": 43}) == 0


@pytest.mark.asyncio
async def test_stream_ends_when_hub_stops(monkeypatch: pytest.MonkeyPatch) -> None:
    hub = NotificationHub()
    monkeypatch.setattr(events_router, "get_notification_hub", lambda: hub)

    response = await events_router.subscribe_events()
    stream = response.body_iterator
    await stream.__anext__()

    await hub.stop()

    with pytest.raises(StopAsyncIteration):
        await stream.__anext__()


@pytest.mark.asyncio
async def test_unstarted_stream_registers_no_subscriber(monkeypatch: pytest.MonkeyPatch) -> None:
    hub = NotificationHub()
    monkeypatch.setattr(events_router, "get_notification_hub", lambda: hub)

    response = await events_router.subscribe_events()

    assert hub.subscriber_count == 0

    await response.body_iterator.aclose()

    assert hub.subscriber_count == 0
    assert hub.broadcast_hub.broadcast("reload", {"t": 1}) == 0
