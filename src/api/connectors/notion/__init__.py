"""Conector Notion - adapter de borda para a API e os webhooks do Notion.

Responsabilidades:
- Consulta paginada do database (http_client)
- Webhook (challenge, assinatura HMAC, parsing)
"""

from .http_client import NotionHttpClient
from .signature import SignatureResult, verify_notion_signature

__all__ = [
    "NotionHttpClient",
    "SignatureResult",
    "verify_notion_signature",
]
