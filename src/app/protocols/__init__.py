"""Protocolos e contratos do core da aplicação."""

from .normalizer import RecordNormalizerProtocol
from .record_store import RecordPage, RecordStoreProtocol

__all__ = [
    "RecordNormalizerProtocol",
    "RecordPage",
    "RecordStoreProtocol",
]
