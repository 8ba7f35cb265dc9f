"""Agregador de settings do Notion Live Board.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Notion (database + webhook)
from config.settings.notion import (
    NOTION_API_BASE_URL,
    NOTION_API_VERSION,
    SIGNATURE_HEADER,
    NotionSettings,
    SignatureMode,
    get_notion_settings,
)

# Tempo real (SSE)
from config.settings.realtime import (
    RealtimeSettings,
    get_realtime_settings,
)

__all__ = [
    # Constants
    "NOTION_API_BASE_URL",
    "NOTION_API_VERSION",
    "SIGNATURE_HEADER",
    # Base
    "BaseSettings",
    "Environment",
    # Notion
    "NotionSettings",
    # Realtime
    "RealtimeSettings",
    "SignatureMode",
    "get_base_settings",
    "get_notion_settings",
    "get_realtime_settings",
]
