"""Factories de dependências: criação de implementações concretas.

Centraliza o wiring entre settings, conectores e serviços.
"""

from __future__ import annotations

import logging

from api.connectors.notion import NotionHttpClient
from api.normalizers.notion import NotionRecordNormalizer
from app.services.notification_hub import NotificationHub
from app.services.record_fetcher import RecordFetcher
from config.settings import get_notion_settings, get_realtime_settings

logger = logging.getLogger(__name__)


def create_notification_hub() -> NotificationHub:
    """Cria o hub de tempo real a partir de RealtimeSettings."""
    settings = get_realtime_settings()
    hub = NotificationHub(
        debounce_seconds=settings.debounce_seconds,
        keepalive_seconds=settings.keepalive_seconds,
        queue_size=settings.subscriber_queue_size,
    )
    logger.info(
        "notification_hub_created",
        extra={
            "debounce_seconds": settings.debounce_seconds,
            "keepalive_seconds": settings.keepalive_seconds,
        },
    )
    return hub


def create_record_fetcher() -> RecordFetcher:
    """Cria RecordFetcher sobre o database Notion configurado.

    Raises:
        ValueError: Se NOTION_DATABASE_ID não estiver configurado.
    """
    settings = get_notion_settings()
    return RecordFetcher(
        store=NotionHttpClient.from_settings(settings),
        normalizer=NotionRecordNormalizer(),
        page_size=settings.page_size,
    )
