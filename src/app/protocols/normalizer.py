"""Protocolo de normalização de registros do store externo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.item import Item


class RecordNormalizerProtocol(Protocol):
    """Contrato mínimo: um registro bruto vira Item ou é excluído (None)."""

    def normalize(self, raw: Any) -> Item | None: ...
