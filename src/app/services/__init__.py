"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
IO externo fica em api/connectors/.
"""

from app.services.broadcast_hub import BroadcastHub, Subscriber, format_sse
from app.services.notification_hub import NotificationHub
from app.services.notification_scheduler import NotificationScheduler
from app.services.record_fetcher import RecordFetcher

__all__ = [
    "BroadcastHub",
    "NotificationHub",
    "NotificationScheduler",
    "RecordFetcher",
    "Subscriber",
    "format_sse",
]
