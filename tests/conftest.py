"""Configuração do pytest para o projeto Notion Live Board."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.bootstrap import get_notification_hub, get_record_fetcher  # noqa: E402
from config.settings import (  # noqa: E402
    get_base_settings,
    get_notion_settings,
    get_realtime_settings,
)

_CACHED_GETTERS = (
    get_base_settings,
    get_notion_settings,
    get_realtime_settings,
    get_notification_hub,
    get_record_fetcher,
)


@pytest.fixture(autouse=True)
def _clear_cached_singletons():
    """Settings e singletons são lru_cache; cada teste começa limpo."""
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
