"""Connectors: adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente HTTP base (httpx, uma tentativa por chamada)
- notion/: API de databases e webhooks do Notion

Cada fonte tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
