"""Validação de assinatura HMAC-SHA256 dos webhooks do Notion.

O Notion envia `X-Notion-Signature: sha256=<hex>` calculado sobre o
corpo da requisição com o verification_token como chave.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from config.settings.notion import SIGNATURE_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings.notion import SignatureMode

SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da checagem de assinatura."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def compute_signature(secret: str, payload: bytes) -> str:
    """Calcula o valor esperado do header (`sha256=<hex>`)."""
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def minified_body(payload: Any) -> bytes:
    """Re-serializa o JSON como o servidor legado fazia (JSON.stringify).

    Aproximação, não cópia byte a byte: floats inteiros (`1.0` vira `1` no
    JS), escapes de caracteres especiais e números grandes podem divergir.
    Payloads assim falham a assinatura no modo `minified`; use `raw`.
    """
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def get_signature_header(headers: Mapping[str, str]) -> str | None:
    """Busca o header de assinatura sem depender de caixa."""
    for key, value in headers.items():
        if key.lower() == SIGNATURE_HEADER:
            return value
    return None


def signatures_match(received: str, expected: str) -> bool:
    """Compara em tempo constante; tamanhos diferentes só retornam False.

    Compara bytes para que header com caracteres não-ASCII não levante
    TypeError em hmac.compare_digest.
    """
    return hmac.compare_digest(
        received.encode("utf-8", errors="surrogateescape"),
        expected.encode("utf-8"),
    )


def verify_notion_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    mode: SignatureMode = "raw",
    payload: Any = None,
) -> SignatureResult:
    """Valida a assinatura do webhook.

    Args:
        raw_body: Corpo exatamente como recebido
        headers: Headers recebidos
        secret: Secret configurado (None/vazio = modo permissivo)
        mode: `raw` assina os bytes recebidos; `minified` assina a
            re-serialização de `payload` (comportamento do servidor legado)
        payload: JSON já parseado, obrigatório no modo `minified`

    Returns:
        SignatureResult
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    received = get_signature_header(headers)
    if not received:
        return SignatureResult(valid=False, error="missing_signature")

    if mode == "minified":
        if payload is None:
            return SignatureResult(valid=False, error="signature_mismatch")
        signed_bytes = minified_body(payload)
    else:
        signed_bytes = raw_body

    expected = compute_signature(secret, signed_bytes)
    if not signatures_match(received.strip(), expected):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)
