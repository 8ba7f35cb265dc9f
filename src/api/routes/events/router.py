"""Stream SSE de eventos para os viewers do dashboard.

Eventos:
- hello  {ok: true}      na conexão
- ping   {t: epoch_ms}   a cada 25s (keepalive para proxies)
- reload {t: epoch_ms}   a cada mudança coalescida no database
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from app.bootstrap import get_notification_hub

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from app.services.notification_hub import NotificationHub

logger = logging.getLogger(__name__)

router = APIRouter()

SSE_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    # Desliga buffering do nginx/Cloud Run para entregar frames na hora
    "X-Accel-Buffering": "no",
}


async def stream_subscriber(hub: NotificationHub) -> AsyncIterator[str]:
    """Registra o viewer e escreve seus frames até desconexão ou encerramento.

    O registro só acontece quando o stream começa a ser consumido.
    Starlette cancela o gerador quando o cliente desconecta; o finally
    remove o subscriber do hub.
    """
    subscriber = hub.subscribe()
    try:
        while True:
            frame = await subscriber.next_frame()
            if frame is None:
                break
            yield frame
    finally:
        hub.unsubscribe(subscriber)


@router.get("/events")
async def subscribe_events() -> StreamingResponse:
    """Abre o stream text/event-stream e registra o viewer no hub."""
    return StreamingResponse(
        stream_subscriber(get_notification_hub()),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
