"""Normalizers: conversão de registros externos para modelos internos.

Estrutura:
- notion/: páginas de database do Notion → Item

Cada fonte tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .notion import NotionRecordNormalizer, normalize_record

__all__ = [
    "NotionRecordNormalizer",
    "normalize_record",
]
