"""Normalizer Notion: páginas do database → Item."""

from .normalizer import NAME_FIELD_ALIASES, NotionRecordNormalizer, normalize_record, resolve_name

__all__ = [
    "NAME_FIELD_ALIASES",
    "NotionRecordNormalizer",
    "normalize_record",
    "resolve_name",
]
