"""Leitura defensiva de propriedades de página do Notion.

O schema do database é controlado pelo usuário: qualquer propriedade
pode faltar, ter outro tipo ou vir com formato inesperado. Cada leitor
devolve um valor opcional e nunca levanta exceção.
"""

from __future__ import annotations

from typing import Any


def get_property(properties: dict[str, Any], name: str) -> dict[str, Any] | None:
    """Retorna o bloco da propriedade `name` se for um objeto."""
    block = properties.get(name)
    if isinstance(block, dict):
        return block
    return None


def _segments(block: dict[str, Any] | None, key: str) -> list[dict[str, Any]]:
    if block is None:
        return []
    value = block.get(key)
    if not isinstance(value, list):
        return []
    return [segment for segment in value if isinstance(segment, dict)]


def _plain_text(segment: dict[str, Any]) -> str:
    text = segment.get("plain_text")
    return text if isinstance(text, str) else ""


def extract_title(block: dict[str, Any] | None) -> str:
    """Extrai o texto do primeiro segmento de uma propriedade title, aparado."""
    segments = _segments(block, "title")
    if not segments:
        return ""
    return _plain_text(segments[0]).strip()


def extract_rich_text(block: dict[str, Any] | None) -> str | None:
    """Concatena os segmentos de rich_text; vazio vira None."""
    text = "".join(_plain_text(segment) for segment in _segments(block, "rich_text"))
    return text or None


def extract_number(block: dict[str, Any] | None) -> int | float | None:
    """Extrai propriedade number (bool não conta como número)."""
    if block is None:
        return None
    value = block.get("number")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def extract_date_start(block: dict[str, Any] | None) -> str | None:
    """Extrai date.start (YYYY-MM-DD ou ISO 8601)."""
    if block is None:
        return None
    date_block = block.get("date")
    if not isinstance(date_block, dict):
        return None
    start = date_block.get("start")
    if isinstance(start, str) and start:
        return start
    return None


def extract_checkbox(block: dict[str, Any] | None) -> bool:
    """True apenas para checkbox explicitamente marcado."""
    if block is None:
        return False
    return block.get("checkbox") is True
