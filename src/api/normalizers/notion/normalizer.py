"""Normalizer de páginas do Notion → Item.

Converte uma página bruta de `databases/{id}/query` em Item tipado,
ou None quando o registro não tem id ou nome resolvível.
"""

from __future__ import annotations

import logging
from typing import Any

from app.domain.item import Item

from .extractor import (
    extract_checkbox,
    extract_date_start,
    extract_number,
    extract_rich_text,
    extract_title,
    get_property,
)

logger = logging.getLogger(__name__)

# Ordem de prioridade para o título: "item name" é o recomendado no template,
# "Name" é o título padrão de databases novos do Notion.
NAME_FIELD_ALIASES: tuple[str, ...] = ("item name", "Name")

LEVEL_FIELD = "level"
UPPER_FIELD = "upper"
DEPENDENCY_FIELD = "dependency"
DONE_FIELD = "Done"
DATE_FIELDS: dict[str, str] = {
    "early_start": "early start",
    "late_start": "late start",
    "early_finish": "early finish",
    "late_finish": "late finish",
}


def resolve_name(properties: dict[str, Any]) -> str:
    """Primeiro título não vazio dentre NAME_FIELD_ALIASES."""
    for alias in NAME_FIELD_ALIASES:
        name = extract_title(get_property(properties, alias))
        if name:
            return name
    return ""


def normalize_record(raw: Any) -> Item | None:
    """Normaliza um registro bruto.

    Args:
        raw: Página do Notion (dict com `id` e `properties`)

    Returns:
        Item, ou None se o registro deve ser excluído do resultado.
    """
    if not isinstance(raw, dict):
        return None

    record_id = raw.get("id")
    if not isinstance(record_id, str) or not record_id:
        logger.debug("record_skipped", extra={"reason": "missing_id"})
        return None

    properties = raw.get("properties")
    if not isinstance(properties, dict):
        properties = {}

    name = resolve_name(properties)
    if not name:
        return None

    dates = {
        field: extract_date_start(get_property(properties, prop))
        for field, prop in DATE_FIELDS.items()
    }
    return Item(
        id=record_id,
        name=name,
        level=extract_number(get_property(properties, LEVEL_FIELD)),
        upper=extract_rich_text(get_property(properties, UPPER_FIELD)),
        dependency=extract_rich_text(get_property(properties, DEPENDENCY_FIELD)),
        done=extract_checkbox(get_property(properties, DONE_FIELD)),
        **dates,
    )


class NotionRecordNormalizer:
    """Adapter do normalizer para injeção no RecordFetcher."""

    def normalize(self, raw: Any) -> Item | None:
        return normalize_record(raw)
