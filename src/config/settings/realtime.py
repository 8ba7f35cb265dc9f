"""Settings do canal de tempo real (SSE + debounce de notificações)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class RealtimeSettings:
    """Configurações de fan-out para viewers conectados.

    Attributes:
        debounce_seconds: Janela de silêncio antes de emitir `reload`
        keepalive_seconds: Intervalo entre eventos `ping`
        subscriber_queue_size: Frames pendentes por viewer antes de descartá-lo
    """

    debounce_seconds: float = 0.2
    keepalive_seconds: float = 25.0
    subscriber_queue_size: int = 100

    def validate(self) -> list[str]:
        """Valida limites de tempo e fila."""
        errors: list[str] = []

        if self.debounce_seconds <= 0:
            errors.append("NOTIFY_DEBOUNCE_SECONDS deve ser > 0")

        if self.keepalive_seconds <= 0:
            errors.append("SSE_KEEPALIVE_SECONDS deve ser > 0")

        if self.subscriber_queue_size < 1:
            errors.append("SSE_SUBSCRIBER_QUEUE_SIZE deve ser >= 1")

        return errors


def _load_from_env() -> RealtimeSettings:
    """Carrega RealtimeSettings a partir de variáveis de ambiente."""
    return RealtimeSettings(
        debounce_seconds=float(os.getenv("NOTIFY_DEBOUNCE_SECONDS", "0.2")),
        keepalive_seconds=float(os.getenv("SSE_KEEPALIVE_SECONDS", "25")),
        subscriber_queue_size=int(os.getenv("SSE_SUBSCRIBER_QUEUE_SIZE", "100")),
    )


@lru_cache(maxsize=1)
def get_realtime_settings() -> RealtimeSettings:
    """Retorna instância cacheada de RealtimeSettings."""
    return _load_from_env()
