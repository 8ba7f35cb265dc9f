"""Estado compartilhado de tempo real do processo.

Todos os viewers espelham o mesmo database, então há um único hub:
conjunto de subscribers, timer de debounce e keepalive pertencem
a este objeto (obtido via app.bootstrap.get_notification_hub).
"""

from __future__ import annotations

import logging

from app.services.broadcast_hub import (
    DEFAULT_KEEPALIVE_SECONDS,
    DEFAULT_QUEUE_SIZE,
    BroadcastHub,
    Subscriber,
    epoch_ms,
)
from app.services.notification_scheduler import (
    DEFAULT_DEBOUNCE_SECONDS,
    NotificationScheduler,
)

logger = logging.getLogger(__name__)

RELOAD_EVENT = "reload"


class NotificationHub:
    """Webhook confiável → reload coalescido → todos os viewers."""

    def __init__(
        self,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        keepalive_seconds: float = DEFAULT_KEEPALIVE_SECONDS,
        queue_size: int = DEFAULT_QUEUE_SIZE,
    ) -> None:
        self._broadcast_hub = BroadcastHub(queue_size=queue_size)
        self._scheduler = NotificationScheduler(self._emit_reload, delay=debounce_seconds)
        self._keepalive_seconds = keepalive_seconds

    @property
    def broadcast_hub(self) -> BroadcastHub:
        return self._broadcast_hub

    @property
    def scheduler(self) -> NotificationScheduler:
        return self._scheduler

    @property
    def subscriber_count(self) -> int:
        return self._broadcast_hub.subscriber_count

    def subscribe(self) -> Subscriber:
        return self._broadcast_hub.subscribe()

    def unsubscribe(self, subscriber: Subscriber) -> None:
        self._broadcast_hub.unsubscribe(subscriber)

    def notify_change(self) -> None:
        """Um evento de mudança validado chegou."""
        self._scheduler.notify()

    def start(self) -> None:
        self._broadcast_hub.start_keepalive(self._keepalive_seconds)
        logger.info(
            "notification_hub_started",
            extra={
                "debounce_seconds": self._scheduler.delay,
                "keepalive_seconds": self._keepalive_seconds,
            },
        )

    async def stop(self) -> None:
        self._scheduler.cancel()
        await self._broadcast_hub.stop_keepalive()
        self._broadcast_hub.close_all()
        logger.info("notification_hub_stopped")

    def _emit_reload(self) -> None:
        delivered = self._broadcast_hub.broadcast(RELOAD_EVENT, {"t": epoch_ms()})
        logger.info("reload_broadcast", extra={"delivered": delivered})
