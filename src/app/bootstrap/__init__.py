"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e mantém os singletons do processo.

Uso:
    from app.bootstrap import initialize_app, get_notification_hub

    initialize_app()
    hub = get_notification_hub()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_notion_settings,
    get_realtime_settings,
)

if TYPE_CHECKING:
    from app.services.notification_hub import NotificationHub
    from app.services.record_fetcher import RecordFetcher

SERVICE_NAME = "notion_live_board"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"notion: {error}" for error in get_notion_settings().validate())
    errors.extend(f"realtime: {error}" for error in get_realtime_settings().validate())

    if not get_notion_settings().webhook_secret:
        logger.warning(
            "webhook_secret_not_configured",
            extra={
                "component": "bootstrap",
                "detail": "webhooks aceitos sem assinatura até NOTION_WEBHOOK_SECRET ser definido",
            },
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Singletons (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_notification_hub() -> NotificationHub:
    """Obtém o hub de tempo real do processo (singleton)."""
    from app.bootstrap.dependencies import create_notification_hub
    return create_notification_hub()


@lru_cache(maxsize=1)
def get_record_fetcher() -> RecordFetcher:
    """Obtém o RecordFetcher configurado (singleton)."""
    from app.bootstrap.dependencies import create_record_fetcher
    return create_record_fetcher()
