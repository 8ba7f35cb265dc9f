"""Settings específicas do Notion.

Configurações da API de consulta do database e do webhook de mudanças.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

# Constantes da API do Notion
NOTION_API_BASE_URL: str = "https://api.notion.com"
NOTION_API_VERSION: str = "2022-06-28"

SignatureMode = Literal["raw", "minified"]

# Header HMAC enviado pelo Notion em eventos assinados
SIGNATURE_HEADER: str = "x-notion-signature"


@dataclass(frozen=True)
class NotionSettings:
    """Configurações do Notion.

    Attributes:
        token: Token da integração (Bearer)
        database_id: ID do database espelhado
        webhook_secret: Secret HMAC do webhook (vazio = ainda não registrado)
        webhook_signature_mode: Bytes assinados (raw = corpo recebido,
            minified = JSON re-serializado, compatível com o servidor legado)
        api_base_url: URL base da API
        api_version: Valor do header Notion-Version
        page_size: Registros por página na consulta paginada
        request_timeout_seconds: Timeout por requisição de página
    """

    # Credenciais
    token: str = ""
    database_id: str = ""
    webhook_secret: str = ""
    webhook_signature_mode: SignatureMode = "raw"

    # API
    api_base_url: str = NOTION_API_BASE_URL
    api_version: str = NOTION_API_VERSION
    page_size: int = 100
    request_timeout_seconds: float = 30.0

    @property
    def query_endpoint(self) -> str:
        """URL de consulta do database configurado.

        Raises:
            ValueError: Se database_id não configurado.
        """
        if not self.database_id:
            raise ValueError("database_id é obrigatório")
        return f"{self.api_base_url}/v1/databases/{self.database_id}/query"

    @property
    def is_store_configured(self) -> bool:
        """True quando há credenciais mínimas para consultar o database."""
        return bool(self.token and self.database_id)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Notion.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.token:
            errors.append("NOTION_TOKEN não configurado")

        if not self.database_id:
            errors.append("NOTION_DATABASE_ID não configurado")

        if self.webhook_signature_mode not in ("raw", "minified"):
            errors.append(
                "NOTION_WEBHOOK_SIGNATURE_MODE deve ser 'raw' ou 'minified'"
            )

        if not 1 <= self.page_size <= 100:
            errors.append("NOTION_PAGE_SIZE deve estar entre 1 e 100")

        if self.request_timeout_seconds <= 0:
            errors.append("NOTION_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> NotionSettings:
    """Carrega NotionSettings a partir de variáveis de ambiente."""
    return NotionSettings(
        token=os.getenv("NOTION_TOKEN", ""),
        database_id=os.getenv("NOTION_DATABASE_ID", ""),
        webhook_secret=os.getenv("NOTION_WEBHOOK_SECRET", ""),
        webhook_signature_mode=os.getenv(  # type: ignore[arg-type]
            "NOTION_WEBHOOK_SIGNATURE_MODE", "raw"
        ).lower(),
        api_base_url=os.getenv("NOTION_API_BASE_URL", NOTION_API_BASE_URL),
        api_version=os.getenv("NOTION_API_VERSION", NOTION_API_VERSION),
        page_size=int(os.getenv("NOTION_PAGE_SIZE", "100")),
        request_timeout_seconds=float(
            os.getenv("NOTION_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_notion_settings() -> NotionSettings:
    """Retorna instância cacheada de NotionSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
