"""Consulta completa do database externo, página a página.

A ordenação é delegada ao store (level asc, last_edited_time asc);
aqui apenas concatenamos as páginas na ordem recebida.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from utils.errors import UpstreamQueryError

if TYPE_CHECKING:
    from app.domain.item import Item
    from app.protocols import RecordNormalizerProtocol, RecordStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


class RecordFetcher:
    """Segue o cursor do store até a última página e normaliza cada registro."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        normalizer: RecordNormalizerProtocol,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._store = store
        self._normalizer = normalizer
        self._page_size = page_size

    async def fetch_all(self) -> list[Item]:
        """Retorna todos os itens válidos, totalmente materializados.

        Raises:
            UpstreamQueryError: Se qualquer página falhar. Páginas já
                obtidas são descartadas.
        """
        started_at = time.perf_counter()
        items: list[Item] = []
        seen_ids: set[str] = set()
        cursor: str | None = None
        pages = 0
        excluded = 0

        while True:
            page = await self._store.query_page(cursor, self._page_size)
            if not isinstance(page.results, list):
                raise UpstreamQueryError("malformed_page")
            pages += 1

            for raw in page.results:
                item = self._normalizer.normalize(raw)
                if item is None:
                    excluded += 1
                    continue
                # Página pode deslocar durante a paginação; primeiro vence
                if item.id in seen_ids:
                    excluded += 1
                    continue
                seen_ids.add(item.id)
                items.append(item)

            if not (page.has_more and page.next_cursor):
                break
            cursor = page.next_cursor

        logger.info(
            "items_fetched",
            extra={
                "page_count": pages,
                "item_count": len(items),
                "excluded_count": excluded,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return items
