"""Contrato de leitura paginada do store externo de registros."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class RecordPage:
    """Uma página de registros brutos, na ordem devolvida pelo store."""

    results: list[dict[str, Any]] = field(default_factory=list)
    has_more: bool = False
    next_cursor: str | None = None


class RecordStoreProtocol(Protocol):
    """Store externo consultado por cursor.

    Implementações levantam UpstreamQueryError para qualquer falha
    de rede ou de protocolo.
    """

    async def query_page(
        self,
        start_cursor: str | None,
        page_size: int,
    ) -> RecordPage: ...
