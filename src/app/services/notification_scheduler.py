"""Debounce de notificações de mudança.

Rajadas de `notify()` espaçadas por menos de `delay` colapsam em um único
disparo, emitido `delay` segundos após a última chamada. O provider pode
entregar várias notificações para uma única edição (retries, múltiplos
campos); os viewers devem recarregar uma vez só.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.2


class NotificationScheduler:
    """Mantém no máximo um timer pendente; cada notify() reinicia o timer.

    Deve ser usado a partir do event loop (timer e callback rodam na
    mesma thread, então cancelar-e-reiniciar é atômico).
    """

    def __init__(
        self,
        on_fire: Callable[[], None],
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        if delay <= 0:
            raise ValueError("delay deve ser > 0")
        self._on_fire = on_fire
        self._delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._coalesced = 0

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def notify(self) -> None:
        """Registra um evento validado e (re)inicia a janela de silêncio."""
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._coalesced += 1
        self._handle = loop.call_later(self._delay, self._fire)

    def cancel(self) -> None:
        """Descarta o timer pendente sem disparar (shutdown)."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._coalesced = 0

    def _fire(self) -> None:
        coalesced = self._coalesced
        self._handle = None
        self._coalesced = 0
        logger.debug("notification_fired", extra={"coalesced_count": coalesced})
        try:
            self._on_fire()
        except Exception:
            logger.exception("notification_fire_failed")
