"""Fan-out de eventos SSE para todos os viewers conectados.

Cada viewer é um Subscriber com uma fila limitada de frames já
serializados; a rota /events consome a fila e escreve no stream.
Entrega best-effort: viewer que não aceita a escrita é removido.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import time
import uuid
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_KEEPALIVE_SECONDS = 25.0
DEFAULT_QUEUE_SIZE = 100


def epoch_ms() -> int:
    """Timestamp atual em milissegundos (campo `t` dos eventos)."""
    return int(time.time() * 1000)


def format_sse(event: str, payload: dict[str, Any] | None = None) -> str:
    """Serializa um evento no formato text/event-stream."""
    data = json.dumps(payload or {}, separators=(",", ":"), ensure_ascii=False)
    return f"event: {event}\ndata: {data}\n\n"


class SubscriberClosedError(RuntimeError):
    """Escrita em subscriber já encerrado."""


class Subscriber:
    """Conexão SSE ativa de um viewer."""

    def __init__(self, queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self.id = uuid.uuid4().hex
        # None é o sentinela de encerramento
        self._queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=queue_size)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, frame: str) -> None:
        """Enfileira um frame.

        Raises:
            SubscriberClosedError: Se o subscriber foi encerrado.
            asyncio.QueueFull: Se o viewer parou de consumir.
        """
        if self._closed:
            raise SubscriberClosedError(self.id)
        self._queue.put_nowait(frame)

    async def next_frame(self) -> str | None:
        """Aguarda o próximo frame; None quando o subscriber foi encerrado."""
        if self._closed and self._queue.empty():
            return None
        return await self._queue.get()

    def pending_frames(self) -> int:
        return self._queue.qsize()

    def close(self) -> None:
        """Marca como encerrado e acorda o consumidor do stream."""
        if self._closed:
            return
        self._closed = True
        # Fila cheia: o consumidor não está bloqueado e verá `closed` ao esvaziar
        with contextlib.suppress(asyncio.QueueFull):
            self._queue.put_nowait(None)


class BroadcastHub:
    """Conjunto de subscribers ativos e task periódica de keepalive."""

    def __init__(self, queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self._queue_size = queue_size
        self._subscribers: set[Subscriber] = set()
        self._keepalive_task: asyncio.Task[None] | None = None

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> Subscriber:
        """Registra um viewer e envia `hello` imediatamente."""
        subscriber = Subscriber(self._queue_size)
        subscriber.send(format_sse("hello", {"ok": True}))
        self._subscribers.add(subscriber)
        logger.info(
            "subscriber_connected",
            extra={"subscriber_id": subscriber.id, "subscriber_count": len(self._subscribers)},
        )
        return subscriber

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove o viewer (idempotente)."""
        subscriber.close()
        if subscriber in self._subscribers:
            self._subscribers.discard(subscriber)
            logger.info(
                "subscriber_disconnected",
                extra={
                    "subscriber_id": subscriber.id,
                    "subscriber_count": len(self._subscribers),
                },
            )

    def broadcast(self, event: str, payload: dict[str, Any] | None = None) -> int:
        """Entrega o evento a todos os viewers ativos.

        Nunca levanta por causa de um viewer morto; este é removido.

        Returns:
            Quantidade de viewers que receberam o evento.
        """
        frame = format_sse(event, payload)
        delivered = 0
        # Snapshot: o conjunto pode encolher durante a iteração
        for subscriber in list(self._subscribers):
            try:
                subscriber.send(frame)
            except (SubscriberClosedError, asyncio.QueueFull):
                logger.warning(
                    "subscriber_dropped",
                    extra={"subscriber_id": subscriber.id, "event": event},
                )
                self.unsubscribe(subscriber)
                continue
            delivered += 1
        logger.debug("event_broadcast", extra={"event": event, "delivered": delivered})
        return delivered

    def start_keepalive(self, interval: float = DEFAULT_KEEPALIVE_SECONDS) -> None:
        """Inicia `ping` periódico para evitar timeout de proxies ociosos."""
        if self._keepalive_task is not None and not self._keepalive_task.done():
            return
        self._keepalive_task = asyncio.create_task(self._keepalive_loop(interval))

    async def stop_keepalive(self) -> None:
        task = self._keepalive_task
        self._keepalive_task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def close_all(self) -> None:
        """Encerra todos os viewers (shutdown)."""
        for subscriber in list(self._subscribers):
            self.unsubscribe(subscriber)

    async def _keepalive_loop(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            self.broadcast("ping", {"t": epoch_ms()})
