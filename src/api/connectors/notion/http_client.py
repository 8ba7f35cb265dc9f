"""Cliente HTTP do Notion: consulta paginada de database.

Implementa RecordStoreProtocol sobre `POST /v1/databases/{id}/query`.
Qualquer falha vira UpstreamQueryError; sem retry interno.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from app.protocols import RecordPage
from utils.errors import UpstreamQueryError

if TYPE_CHECKING:
    from config.settings import NotionSettings

logger: logging.Logger = logging.getLogger(__name__)

# level asc, depois última edição asc (mais antigos primeiro dentro do nível)
DEFAULT_SORTS: list[dict[str, str]] = [
    {"property": "level", "direction": "ascending"},
    {"timestamp": "last_edited_time", "direction": "ascending"},
]


class NotionHttpClient(HttpClient):
    """Cliente da API do Notion para um database fixo."""

    def __init__(
        self,
        *,
        token: str,
        query_endpoint: str,
        api_version: str,
        config: HttpClientConfig | None = None,
        sorts: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(config)
        self._token = token
        self._query_endpoint = query_endpoint
        self._api_version = api_version
        self._sorts = sorts if sorts is not None else DEFAULT_SORTS

    @classmethod
    def from_settings(
        cls,
        settings: NotionSettings,
        transport: Any | None = None,
    ) -> NotionHttpClient:
        """Cria cliente a partir de NotionSettings."""
        return cls(
            token=settings.token,
            query_endpoint=settings.query_endpoint,
            api_version=settings.api_version,
            config=HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                transport=transport,
            ),
        )

    async def query_page(
        self,
        start_cursor: str | None,
        page_size: int,
    ) -> RecordPage:
        """Consulta uma página do database.

        Raises:
            UpstreamQueryError: Falha de rede, status de erro ou resposta malformada.
        """
        body: dict[str, Any] = {"page_size": page_size, "sorts": self._sorts}
        if start_cursor:
            body["start_cursor"] = start_cursor

        try:
            response = await self.post(
                self._query_endpoint,
                json=body,
                headers=self._build_headers(),
            )
        except HttpError as exc:
            logger.error(
                "notion_query_failed",
                extra={"error": str(exc), "status_code": exc.status_code},
            )
            raise UpstreamQueryError(
                f"notion query failed: {exc}", status_code=exc.status_code
            ) from exc

        return self._parse_page(response.content)

    def _build_headers(self) -> dict[str, str]:
        if not self._token or not self._token.strip():
            raise UpstreamQueryError("notion token not configured")
        return {
            "Authorization": f"Bearer {self._token}",
            "Notion-Version": self._api_version,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _parse_page(content: bytes) -> RecordPage:
        try:
            data = json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise UpstreamQueryError("notion response is not valid JSON") from exc

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise UpstreamQueryError("notion response missing results")

        next_cursor = data.get("next_cursor")
        return RecordPage(
            results=data["results"],
            has_more=data.get("has_more") is True,
            next_cursor=next_cursor if isinstance(next_cursor, str) else None,
        )
